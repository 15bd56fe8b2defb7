from pathlib import Path
from typing import List

from jinja2 import Environment

from versync.cli.managers.config_manager import CONFIG_FILENAME
from versync.core.synchronizer import VersionTarget
from versync.utils.logging import get_logger

logger = get_logger(__name__)


# Template file constants
BASE_CONFIG_TEMPLATE = "base-config.yaml"


class TemplateManager:
    """Renders the starter versync configuration"""

    def __init__(self, env: Environment):
        self.env = env

    def render_config(self, targets: List[VersionTarget]) -> str:
        template = self.env.get_template(BASE_CONFIG_TEMPLATE)
        rendered = template.render(targets=targets)
        return rendered if rendered.endswith("\n") else rendered + "\n"

    def write_config(self, root: Path, targets: List[VersionTarget], force: bool = False) -> Path:
        config_path = Path(root) / CONFIG_FILENAME
        if config_path.exists() and not force:
            raise FileExistsError(f"{config_path} already exists (use --force to overwrite)")

        config_path.write_text(self.render_config(targets), encoding="utf-8")
        logger.info(f"Wrote {config_path}")
        return config_path
