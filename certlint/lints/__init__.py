"""
Built-in lint corpus, grouped by the standard each lint comes from.

Every lint module exposes `register(registry)`; every source package chains
its modules. Adding a lint means adding a module and listing it in its
package's MODULES; the engine itself does not change.
"""

from __future__ import annotations

from ..lint.registry import Registry
from . import cabf_br, cabf_ev, cabf_smime_br, community, rfc

SOURCE_PACKAGES = (cabf_br, cabf_ev, cabf_smime_br, community, rfc)


def register_all(registry: Registry) -> Registry:
    """Register every built-in lint into `registry` (which is left unfrozen)."""
    for package in SOURCE_PACKAGES:
        package.register(registry)
    return registry
