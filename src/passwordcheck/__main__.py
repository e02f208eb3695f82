"""Entry point for 'python -m passwordcheck' command."""

from passwordcheck.cli import main

if __name__ == "__main__":
    main()
