class Player:
    """The token the host loop moves around. Only the loop that owns it should call move_to."""

    def __init__(self, shelf):
        self.current_shelf = shelf
        self.moves = 0

    @property
    def level(self):
        return self.current_shelf.level

    def move_to(self, shelf):
        if shelf is None or shelf == self.current_shelf:
            return False
        self.current_shelf = shelf
        self.moves += 1
        return True

    def check_in(self, layout):
        assert self.current_shelf in layout, f"player shelf {self.current_shelf} is not in {layout!r}"

    def __repr__(self):
        return f"Player(shelf={tuple(self.current_shelf)}, moves={self.moves})"
