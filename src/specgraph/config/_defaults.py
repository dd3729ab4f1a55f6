"""Default configuration values.

Every key a config file may set appears here, so user files only need to
carry the values they change.
"""

from typing import Any, Final

DEFAULT_CONFIG: Final[dict[str, Any]] = {
    "analysis": {
        "high_coupling_threshold": 0.5,
        "high_fan_out_threshold": 10,
        "max_depth_warning": 10,
        "complexity_node_threshold": 100,
        "most_connected_limit": 10,
        "coverage_warning_percentage": 70.0,
        "requirement_coverage_warning": 80.0,
        "component_coverage_warning": 90.0,
    },
    "references": {
        "similarity_threshold": 0.6,
        "max_suggestions": 3,
        "allow_self_references": False,
    },
    "logging": {
        "level": "warning",
        "format": "text",
        "file": "",
    },
}
