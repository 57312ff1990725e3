"""Website Roaster — grade a website's markup and write landing pages."""

__version__ = "1.0.0"
