"""create-tslib: interactive generator for TypeScript library projects."""

__version__ = "0.1.0"
