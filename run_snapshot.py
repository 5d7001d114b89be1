"""
NetPlus one-shot collector
Prints a single snapshot as JSON. Usage: python run_snapshot.py [category ...]
"""
import json
import os
import sys

sys.path.insert(0, os.getcwd())

from netplus.agent.collector import SnapshotCollector

if __name__ == "__main__":
    categories = sys.argv[1:] or "all"
    try:
        with SnapshotCollector() as collector:
            snapshot = collector.collect(categories)
        print(json.dumps(snapshot.to_dict(), indent=2))
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(2)
    except KeyboardInterrupt:
        print("\n🛑 Collection stopped by user.")
