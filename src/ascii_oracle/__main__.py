"""ASCII Oracle CLI bootstrap."""

from ascii_oracle.cli import app

if __name__ == "__main__":
    app()
