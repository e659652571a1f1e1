# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for compdoc."""

from compdoc.workspace.config import (
    CONFIG_FILENAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
    render_default_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "WorkspaceConfig",
    "WorkspaceConfigError",
    "load_workspace_config",
    "render_default_config",
]
