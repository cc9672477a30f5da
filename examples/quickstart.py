"""wwt Quickstart: remember a few commands, then find them by description."""

import tempfile
from pathlib import Path

from wwt import WhatWasThat, WwtConfig

# 1. Point the client at a throwaway store
store = Path(tempfile.mkdtemp()) / "store.json"
wwt = WhatWasThat(WwtConfig(store_path=store))

# 2. Remember commands
wwt.remember("ls -l", "list contents of current directory")
wwt.remember("ipfs daemon", "start local ipfs server")
wwt.remember("du -sh .", "show disk usage of current directory")

# 3. Find by describing
for m in wwt.find("port of my local IPFS server"):
    print(f"{m.command} -> {m.record.description} (score: {m.score:.2f})")

# 4. Re-remembering updates the description
wwt.remember("ls -l", "list files in long format")
print(wwt.find("long format")[0].command)

# 5. Forget
print("forgot:", wwt.forget("du -sh ."))
print("forgot again:", wwt.forget("du -sh ."))
