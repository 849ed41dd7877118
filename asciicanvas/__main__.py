"""Main entry point for running asciicanvas as a module."""
from .main import main

if __name__ == "__main__":
    main()
