"""create-js-backend: scaffold Node.js backend projects from a bundled boilerplate."""

__version__ = "1.0.0"
