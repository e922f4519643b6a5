"""Fixed tokens used when rendering a tree as text."""

LEAF_LABEL = "Leaf"

BRANCH_LABEL = "Branch"

# Placed between consecutive child results, never after the last one
CHILD_SEPARATOR = "+"
