"""HexChat addon loader.

Copy or symlink this file into HexChat's ``addons`` directory after
installing the ``channel-translator`` package into the Python environment
HexChat uses.
"""

import hexchat

from channel_translator.plugin import (
    PLUGIN_DESCRIPTION,
    PLUGIN_NAME,
    PLUGIN_VERSION,
    register,
)

__module_name__ = PLUGIN_NAME
__module_version__ = PLUGIN_VERSION
__module_description__ = PLUGIN_DESCRIPTION

_plugin = register(hexchat)
