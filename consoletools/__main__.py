"""``python -m consoletools`` runs the file picker and prints the chosen path."""

from .cli import main


if __name__ == "__main__":
    main()
