"""clean-repo - Delete files ignored by your repository's .gitignore.

Lists everything Git ignores in the current work tree, spares entries
matching user exclusion patterns, and removes the rest only when
explicitly asked to.
"""

__version__ = "0.3.0"
