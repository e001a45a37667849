#!/usr/bin/env python3
"""
Generate goblet and gemstone metadata documents
"""

import sys
from pathlib import Path

from goblet_contracts.metadata import write_collection_metadata


def main() -> None:
    """
    Write all metadata documents, ready to upload one folder per CID
    """
    base_dir = Path(__file__).parent.parent
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else base_dir / "metadata"

    print(f"Generating metadata in {output_dir}...")

    try:
        counts = write_collection_metadata(output_dir)
    except OSError as e:
        print(f"❌ Failed to write metadata: {e}")
        sys.exit(1)

    for folder, count in counts.items():
        print(f"✅ {folder}: {count} documents")

    print("\n🎉 Metadata generation complete!")


if __name__ == "__main__":
    main()
