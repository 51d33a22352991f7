"""Entry point for running atlassian-adf as a module."""

from atlassian_adf import main

if __name__ == "__main__":
    main()
