import asyncio
from pathlib import Path

from argtree import loader

atr = loader(Path(__file__).parent / "argtree.yaml")

if __name__ == "__main__":
    asyncio.run(atr.main())
