"""Core building blocks: session state, options, types and coercion."""
