"""
todolist - Plain Text TODO List

A command-line TODO list manager that keeps items in a human-editable
text file, one numbered item per line.
"""

__version__ = "1.0.0"

# Avoid imports here to prevent circular dependencies
# Modules should be imported directly when needed
