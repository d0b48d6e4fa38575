"""Main entry point for the SnapKV shell."""

from snapkv.cli import main


if __name__ == "__main__":
    main()
