"""Server-side HTML components: a markup tree, its renderer, and Tailwind/Alpine.js-styled widgets."""

__version__ = "0.1.0"