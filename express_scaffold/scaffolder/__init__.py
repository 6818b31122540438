"""express-scaffold scaffolder -- writes the Express.js project skeleton.

Quick usage::

    from express_scaffold.scaffolder import ScaffoldWriter, is_scaffolded

    if not is_scaffolded(root):
        writer = ScaffoldWriter(root)
        writer.write_directories()
        writer.write_placeholders()
        writer.write_templates()
"""

from express_scaffold.scaffolder.generator import (
    ScaffoldWriter,
    is_scaffolded,
    missing_directories,
)
from express_scaffold.scaffolder.layout import DIRECTORIES, PLACEHOLDER_FILES
from express_scaffold.scaffolder.templates import TEMPLATE_FILES

__all__ = [
    "DIRECTORIES",
    "PLACEHOLDER_FILES",
    "TEMPLATE_FILES",
    "ScaffoldWriter",
    "is_scaffolded",
    "missing_directories",
]
