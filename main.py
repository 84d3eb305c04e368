"""
Entry-point.  Keeps top-level script tiny.
"""
from radarscope import app


def main():
    app.main()


if __name__ == "__main__":
    main()
