"""Jinja2 environment for the PHP output templates.

Template lookup order:
1. User's template directory (if provided)
2. Package default templates

Available templates to override:
    - file.php.j2: file header and declaration list
    - input_object_method.php.j2: method appended to every input class
"""

import logging
from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

logger = logging.getLogger(__name__)

FILE_TEMPLATE = "file.php.j2"
INPUT_OBJECT_METHOD_TEMPLATE = "input_object_method.php.j2"


def create_environment(template_dir: str | None = None) -> Environment:
    """Build the template environment; templates in ``template_dir`` win."""
    loaders = []
    if template_dir:
        template_path = Path(template_dir)
        if template_path.is_dir():
            loaders.append(FileSystemLoader(str(template_path)))
        else:
            logger.warning("Template directory %s does not exist, using built-in templates", template_dir)
    loaders.append(PackageLoader("gql_phpgen", "templates"))

    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(),
    )
