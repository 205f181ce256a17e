from ttyenum.sysfs.attributes import read_hex16, read_text
from ttyenum.sysfs.source import AttributeSource, FilesystemSource, default_source

__all__ = [
    "AttributeSource",
    "FilesystemSource",
    "default_source",
    "read_hex16",
    "read_text",
]
