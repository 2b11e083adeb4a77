"""Reglas léxicas de nombres de paquete npm.

Reproduce las reglas de `validate-npm-package-name` que importan al crear un
paquete nuevo:
- errores: el nombre nunca sería aceptado por el registro
- avisos: nombres que solo se toleran en paquetes antiguos
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from urllib.parse import quote

MAX_NAME_LENGTH = 214

DENYLISTED_NAMES: tuple[str, ...] = ("node_modules", "favicon.ico")

NODE_BUILTIN_MODULES: tuple[str, ...] = (
    "assert",
    "async_hooks",
    "buffer",
    "child_process",
    "cluster",
    "console",
    "constants",
    "crypto",
    "dgram",
    "dns",
    "domain",
    "events",
    "fs",
    "http",
    "http2",
    "https",
    "inspector",
    "module",
    "net",
    "os",
    "path",
    "perf_hooks",
    "process",
    "punycode",
    "querystring",
    "readline",
    "repl",
    "stream",
    "string_decoder",
    "sys",
    "timers",
    "tls",
    "trace_events",
    "tty",
    "url",
    "util",
    "v8",
    "vm",
    "wasi",
    "worker_threads",
    "zlib",
)

_SCOPED_PACKAGE = re.compile(r"^(?:@([^/]+?)/)?([^/]+?)$")
_SPECIAL_CHARS = re.compile(r"[~'!()*]")


def _encode_uri_component(value: str) -> str:
    # Mismo conjunto sin escapar que encodeURIComponent; los surrogates de un
    # argv no UTF-8 se codifican (y por tanto no son URL-friendly).
    return quote(value, safe="!~*'()", errors="surrogatepass")


@dataclass
class PackageNameCheck:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid_for_new_packages(self) -> bool:
        return not self.errors and not self.warnings

    @property
    def valid_for_old_packages(self) -> bool:
        return not self.errors


def validate_package_name(name: str) -> PackageNameCheck:
    check = PackageNameCheck()
    errors = check.errors
    warnings = check.warnings

    if not name:
        errors.append("name length must be greater than zero")
        return check

    if name.startswith("."):
        errors.append("name cannot start with a period")
    if name.startswith("_"):
        errors.append("name cannot start with an underscore")
    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")

    lowered = name.lower()
    for denied in DENYLISTED_NAMES:
        if lowered == denied:
            errors.append(f"{denied} is a blacklisted name")

    for builtin in NODE_BUILTIN_MODULES:
        if lowered == builtin:
            warnings.append(f"{builtin} is a core module name")

    if len(name) > MAX_NAME_LENGTH:
        warnings.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")
    if lowered != name:
        warnings.append("name can no longer contain capital letters")
    if _SPECIAL_CHARS.search(name.split("/")[-1]):
        warnings.append('name can no longer contain special characters ("~\'!()*")')

    if _encode_uri_component(name) != name:
        match = _SCOPED_PACKAGE.match(name)
        if match and match.group(1) is not None:
            user, pkg = match.group(1), match.group(2)
            if _encode_uri_component(user) == user and _encode_uri_component(pkg) == pkg:
                return check
        errors.append("name can only contain URL-friendly characters")

    return check
