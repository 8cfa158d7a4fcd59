# src/lineage_harvester/qualifier.py
# Path qualification: turn raw read locations into fully-qualified URIs.

"""
The extractor qualifies every path-based location through a PathQualifier.

DefaultPathQualifier mirrors how a distributed filesystem client qualifies
paths: anything without a scheme is resolved against a working directory and
prefixed with the default filesystem URI.
"""

import os
import posixpath
import re
from typing import Optional, Protocol, runtime_checkable
from urllib.parse import urlsplit

_REPEATED_SLASHES = re.compile(r"/{2,}")


@runtime_checkable
class PathQualifier(Protocol):
    def qualify(self, path: str) -> str:
        ...


class DefaultPathQualifier:
    """
    Qualifies paths against a default filesystem.

    Examples with default_fs="hdfs://nn:8020" and working_dir="/user/etl":
        data/in.csv            -> hdfs://nn:8020/user/etl/data/in.csv
        /tmp//x/../y           -> hdfs://nn:8020/tmp/y
        s3a://bucket//a/b      -> s3a://bucket/a/b
    """

    def __init__(self, default_fs: str = "file:", working_dir: Optional[str] = None) -> None:
        self.default_fs = default_fs.rstrip("/") if "//" in default_fs else default_fs
        self.working_dir = working_dir or os.getcwd()

    def qualify(self, path: str) -> str:
        parts = urlsplit(path)
        # single letters are drive names, not schemes
        if len(parts.scheme) > 1:
            authority = f"//{parts.netloc}" if path[len(parts.scheme) + 1:].startswith("//") else ""
            qualified = f"{parts.scheme}:{authority}{_REPEATED_SLASHES.sub('/', parts.path)}"
            if parts.query:
                qualified += f"?{parts.query}"
            if parts.fragment:
                qualified += f"#{parts.fragment}"
            return qualified

        absolute = posixpath.normpath(posixpath.join(self.working_dir, path))
        # normpath keeps a leading "//" as-is
        absolute = _REPEATED_SLASHES.sub("/", absolute)
        return f"{self.default_fs}{absolute}"
