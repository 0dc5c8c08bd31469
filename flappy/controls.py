"""Keyboard and window events translated into game commands."""

import pygame

from flappy.simulation import Command

KEY_COMMANDS = {
    pygame.K_UP: Command.FLAP,
    pygame.K_SPACE: Command.FLAP,
    pygame.K_w: Command.FLAP,
    pygame.K_DOWN: Command.DIVE,
    pygame.K_s: Command.DIVE,
    pygame.K_RETURN: Command.RESTART,
    pygame.K_KP_ENTER: Command.RESTART,
    pygame.K_r: Command.RESTART,
    pygame.K_e: Command.SHARE,
    pygame.K_ESCAPE: Command.QUIT,
    pygame.K_q: Command.QUIT,
}


class InputAdapter:
    """Maps pygame events to commands, one command per physical key press.

    A key that is already down produces nothing until it is released, so
    OS key repeat or a held key cannot fire the same command twice.
    """

    def __init__(self, key_commands=None):
        self.key_commands = dict(key_commands or KEY_COMMANDS)
        self._held = set()

    def translate(self, event):
        """Return the command for a single event, or None."""
        if event.type == pygame.QUIT:
            return Command.QUIT
        if event.type == pygame.KEYUP:
            self._held.discard(event.key)
            return None
        if event.type != pygame.KEYDOWN:
            return None
        if event.key in self._held:
            return None
        self._held.add(event.key)
        return self.key_commands.get(event.key)

    def commands(self, events):
        """Translate a batch of events, dropping the ones that map to nothing."""
        out = []
        for event in events:
            command = self.translate(event)
            if command is not None:
                out.append(command)
        return out

    def poll(self):
        """Drain pygame's event queue."""
        return self.commands(pygame.event.get())
