"""
Global constants used throughout the project
"""

# Algorithm used by the command line `sort` command when none is given
DEFAULT_SORT_ALGORITHM = "merge"

# Graph size used by the `reach` command when --nodes is omitted.
# None means one more than the largest node index mentioned on the command line.
DEFAULT_NODE_COUNT = None

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"
