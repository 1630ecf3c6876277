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

"""Metadata sources for repolocli.

Available Sources:
    ReplaySource
        A single JSON document read once from a stream (``--stdin``).
    RemoteSource
        Live queries against the repology.org API v1.

Both implement the MetadataSource protocol; the version store depends only
on the protocol.

Example:
    Pick a source the way the CLI does:

        from repolocli.backend import new_backend
        from repolocli.config import load_config

        source = new_backend(load_config(), use_stdin=False)
        packages = source.project("curl")

"""

from .base import MetadataSource, new_backend
from .remote import RemoteSource
from .replay import ReplaySource

__all__ = ["MetadataSource", "RemoteSource", "ReplaySource", "new_backend"]
