# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Result renderers for repolocli.

Available Formats:
    lines : LinesFrontend
        One record per line, space separated (default).
    json : JsonFrontend
        One JSON document per call.
    table : TableFrontend
        Bordered text tables.

Example:
    Render to stdout:

        import sys
        from repolocli.frontend import get_frontend

        frontend = get_frontend("table", sys.stdout)
        frontend.list_packages(source.project("curl"))

"""

# Import frontend modules to trigger self-registration
from . import (
    jsonfmt,  # noqa: F401
    lines,  # noqa: F401
    table,  # noqa: F401
)
from .base import Frontend, available_frontends, get_frontend, register_frontend

__all__ = ["Frontend", "available_frontends", "get_frontend", "register_frontend"]
