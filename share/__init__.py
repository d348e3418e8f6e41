"""Share core: selection in, signed share claim and URL out."""
