"""Entry point for ``python -m revolutionviewer``."""
from revolutionviewer.main import main

if __name__ == "__main__":
    main()
