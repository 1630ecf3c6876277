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

"""Version database for repolocli.

The database remembers, per tracked project, every version string seen so
far. Reconciling it against a metadata source reports what is new, and
optionally records it.

Public API:

- VersionStore: Open, reconcile, show and extend the database
- load_store: Load the database from a JSON file
- save_store: Write the database to a JSON file

Example:
    Basic usage:

        from pathlib import Path
        from repolocli.store import VersionStore

        store = VersionStore.open(Path("versions.json"))
        result = store.reconcile(source, frontend, commit=False)
        print(result.new_versions)

"""

from .tracker import VersionStore, load_store, save_store

__all__ = ["VersionStore", "load_store", "save_store"]
