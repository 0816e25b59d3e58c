"""Enumerate the files used by the TypeScript compiler in a monorepo.

Files are listed relative to the monorepo root and grouped by package name,
for the requested projects and every internal package they depend on.

The exact method runs ``tsc --listFilesOnly``, which follows imports, types
inclusions and reference directives, so its list is authoritative. The
estimate method matches the ``include`` globs of each tsconfig.json against
the filesystem. It ignores ``exclude`` and imports, but is orders of
magnitude faster.
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version

from tsconfig_includes.compiler import CompilerFileLister
from tsconfig_includes.compiler import TypeScriptCompiler
from tsconfig_includes.models import Calculation
from tsconfig_includes.models import PackageIdentity
from tsconfig_includes.models import ResolvedFileSet
from tsconfig_includes.operations import enumerate_by_package
from tsconfig_includes.operations import enumerate_project

try:
    __version__ = version("tsconfig-includes")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "Calculation",
    "CompilerFileLister",
    "PackageIdentity",
    "ResolvedFileSet",
    "TypeScriptCompiler",
    "enumerate_by_package",
    "enumerate_project",
]
