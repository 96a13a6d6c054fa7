"""Starter config file written by ``pjar init``.

Only the options users commonly change are written active; everything else
is documented as a comment and keeps its built-in default.
"""

from pathlib import Path

import yaml

from picklejar.config.models import PickleJarConfig

CONFIG_HEADER = """\
# PickleJar Configuration
# Every key is optional. Environment variables (PICKLEJAR__SECTION__KEY)
# take precedence over this file.

"""


def render_config_template(config: PickleJarConfig | None = None) -> str:
    """Render the commented YAML template for a config."""
    cfg = config or PickleJarConfig()

    discovery = yaml.dump(
        {
            "discovery": {
                "include_patterns": cfg.discovery.include_patterns,
                "exclude_patterns": cfg.discovery.exclude_patterns,
            }
        },
        default_flow_style=False,
        sort_keys=False,
    )

    lines = [
        "# Files scanned for step definitions (globs relative to this workspace).",
        discovery.rstrip(),
        "",
        "# Presentation toggles used by 'pjar list'.",
        "display:",
        f"  group_by_type: {str(cfg.display.group_by_type).lower()}",
        f"  sort_alphabetically: {str(cfg.display.sort_alphabetically).lower()}",
        f"  show_file_path: {str(cfg.display.show_file_path).lower()}",
        "",
        "# Lines after a declaration searched for the bound function signature.",
        "# scan:",
        f"#   signature_lookahead: {cfg.scan.signature_lookahead}",
        f"#   max_workers: {cfg.scan.max_workers}",
        "",
        "# Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
        "# logging:",
        f"#   level: {cfg.logging.level}",
        "",
    ]
    return CONFIG_HEADER + "\n".join(lines)


def write_config_template(path: Path, config: PickleJarConfig | None = None) -> None:
    """Write the config template, creating the parent directory.

    Args:
        path: Path to write config.yaml
        config: Config values (uses defaults if None)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_config_template(config))
