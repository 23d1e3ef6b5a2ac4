"""Command-line entry point: python -m segmentintersection"""
from segmentintersection.main import main

if __name__ == "__main__":
    main()
