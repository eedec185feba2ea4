"""Console shell for the Sphone phone book and dialer."""
