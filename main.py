"""CLI entrypoint for the wolf, goat and cabbage crossing solver."""

from ferryman.cli import main

if __name__ == "__main__":
    main()
