from collections import deque

from shelf_hopper.navigation import Direction, resolve


def policy(env):
    # Strategy: breadth-first search over the hop graph (each shelf links to wherever the four
    # directions resolve to) and take the first hop on the shortest path to a shelf not yet
    # visited. Up is tried first so the token climbs before sweeping sideways. When nothing
    # unvisited is reachable, stand still.
    start = env.player.current_shelf
    order = [Direction.UP, Direction.RIGHT, Direction.LEFT, Direction.DOWN]

    queue = deque([(start, None)])
    seen = {start}
    while queue:
        shelf, first_hop = queue.popleft()
        for direction in order:
            target = resolve(shelf, env.layout, direction)
            if target is None or target in seen:
                continue
            hop = first_hop if first_hop is not None else direction
            if target not in env.visited:
                return [int(hop), 0, 0]
            seen.add(target)
            queue.append((target, hop))

    return [int(Direction.NONE), 0, 0]
