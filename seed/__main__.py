import asyncio
import sys

from seed.seed import main

sys.exit(asyncio.run(main()))
