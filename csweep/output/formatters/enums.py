from enum import Enum


class OutputFormat(str, Enum):
    TREE = "tree"
    TEXT = "text"
    JSON = "json"
    CSV = "csv"
