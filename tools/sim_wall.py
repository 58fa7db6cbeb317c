import json
import random
import sys
from pathlib import Path

from graffiti_core.buffer import FileBuffer
from graffiti_core.engine import AppendEngine
from graffiti_core.errors import AccountTooSmall, WallFull
from graffiti_core.layout import Header
from graffiti_core.protocol import MAX_ACCOUNT_SIZE, MAX_WALL_SIZE
from graffiti_core.reader import read_header
from graffiti_core.text import pack_field

# --- CONFIGURATION ---
NAMES = ["alice", "bob", "carol", "dave", "erin", "frank"]
WORDS = ["gm", "hello", "wall", "was", "here", "satoshi", "ordinals", "vibes", "ship", "it"]


def random_post(rng: random.Random) -> tuple[bytes, bytes]:
    name = rng.choice(NAMES)
    message = " ".join(rng.choice(WORDS) for _ in range(rng.randint(1, 8)))
    return pack_field(name), pack_field(message)


def generate_wall(path: Path, posts: int, max_wall_size: int, seed: int, max_account_size: int = MAX_ACCOUNT_SIZE) -> dict:
    rng = random.Random(seed)
    engine = AppendEngine(max_wall_size=max_wall_size)
    accepted = 0
    rejected = 0

    with FileBuffer(path, max_size=max_account_size) as buffer:
        for _ in range(posts):
            name, message = random_post(rng)
            try:
                engine.append(buffer, name, message)
                accepted += 1
            except (WallFull, AccountTooSmall):
                rejected += 1

    data = path.read_bytes()
    header = read_header(data) if data else Header.fresh(max_wall_size)
    return {
        "path": str(path),
        "accepted": accepted,
        "rejected": rejected,
        "message_count": header.message_count,
        "max_messages": header.max_messages,
        "size": path.stat().st_size,
    }


if __name__ == "__main__":
    # Usage:
    #   python tools/sim_wall.py OUT_FILE [--posts N] [--max-wall-size BYTES] [--seed S] [--max-account-size BYTES]

    args = [a for a in sys.argv[1:] if a]

    def pop_option(arg_list: list[str], flag: str, default: int) -> tuple[int, list[str]]:
        """Remove an integer option from an argv-style list."""
        if flag not in arg_list:
            return default, arg_list
        i = arg_list.index(flag)
        if i + 1 >= len(arg_list):
            raise SystemExit(f"{flag} requires a value")
        return int(arg_list[i + 1]), arg_list[:i] + arg_list[i + 2:]

    posts, args = pop_option(args, "--posts", 10)
    max_wall_size, args = pop_option(args, "--max-wall-size", MAX_WALL_SIZE)
    max_account_size, args = pop_option(args, "--max-account-size", MAX_ACCOUNT_SIZE)
    seed, args = pop_option(args, "--seed", 0)

    out = Path(args[0] if args else "sim_wall.bin")
    summary = generate_wall(out, posts, max_wall_size, seed, max_account_size)
    print(json.dumps(summary, sort_keys=True, separators=(",", ":")))
