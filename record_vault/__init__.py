# ==============================================
# Record Vault
# ==============================================
#
# Package Structure (4 Topics + Orchestrator):
#
# record_vault/
# ├── records/          # Topic 1: Record entity, validation, ids, sort options
# ├── storage/          # Topic 2: Persistence port + MongoDB / MySQL / JSON backends
# ├── persistence/      # Topic 3: Timestamped backup snapshots
# ├── events/           # Topic 4: Lifecycle event notifier + event logger
# ├── export/           # Text export and statistics report rendering
# ├── config.py         # Configuration management
# ├── errors.py         # Error taxonomy
# ├── record_store.py   # Final orchestrator class
# └── cli.py            # Interactive menu entry point
#
# ==============================================

__version__ = "0.1.0"
