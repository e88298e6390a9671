"""Architecture tests: layer dependency direction and code conventions."""
