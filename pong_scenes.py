"""
Scene state machine for Pong: main menu, game and game over.

Transitions live in one table. Keys that trigger transitions fire on the
frame they go down, so a key held across frames only counts once.
"""
import logging
from enum import Enum

from pong_entities import (
    WIDTH, HEIGHT, MAX_SCORE, Ball, Scoreboard, Side, make_paddles,
)

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)
TITLE = "Pong!!!"
ACTIONS = ("up", "down", "start", "quit")


class Scene(Enum):
    MAIN_MENU = "main_menu"
    GAME = "game"
    GAME_OVER = "game_over"


class Event(Enum):
    START = "start"
    RESTART = "restart"
    QUIT = "quit"
    MAX_SCORE = "max_score"


# (scene, event) -> (next scene or None for exit, reset entities)
TRANSITIONS = {
    (Scene.MAIN_MENU, Event.START): (Scene.GAME, True),
    (Scene.MAIN_MENU, Event.QUIT): (None, False),
    (Scene.GAME, Event.MAX_SCORE): (Scene.GAME_OVER, False),
    (Scene.GAME, Event.QUIT): (Scene.MAIN_MENU, True),
    (Scene.GAME_OVER, Event.RESTART): (Scene.GAME, True),
    (Scene.GAME_OVER, Event.QUIT): (Scene.MAIN_MENU, True),
}

KEY_EVENTS = {
    Scene.MAIN_MENU: (("start", Event.START), ("quit", Event.QUIT)),
    Scene.GAME: (("quit", Event.QUIT),),
    Scene.GAME_OVER: (("start", Event.RESTART), ("quit", Event.QUIT)),
}

PROMPTS = {
    Scene.MAIN_MENU: ("Press Space to start | Q to quit", 220),
    Scene.GAME_OVER: ("Press Space to restart | Q to quit", 250),
}


class Blink:
    """Fading prompt colour, advanced once per rendered frame."""

    def __init__(self):
        self.counter = 1000

    def next_color(self):
        self.counter += 1
        if self.counter < 2000:
            level = 255 - self.counter // 8
            return (level, level, level)
        if self.counter >= 2500:
            self.counter = 1000
        return WHITE


class SceneController:
    def __init__(self, player, enemy, ball, scoreboard, input_source, rng, width=WIDTH, height=HEIGHT):
        self.player = player
        self.enemy = enemy
        self.ball = ball
        self.scoreboard = scoreboard
        self.input = input_source
        self.rng = rng
        self.width = width
        self.height = height
        self.scene = Scene.MAIN_MENU
        self.running = True
        self.blink = Blink()
        self._prev_held = set()

    def reset(self):
        self.player.reset()
        self.enemy.reset()
        self.ball.reset()
        self.scoreboard.reset()

    def dispatch(self, event):
        """Apply ``event`` to the current scene. Returns True if it changed anything."""
        key = (self.scene, event)
        if key not in TRANSITIONS:
            return False
        next_scene, do_reset = TRANSITIONS[key]
        if do_reset:
            self.reset()
        logger.debug("scene %s --%s--> %s", self.scene.value, event.value,
                     next_scene.value if next_scene else "exit")
        if next_scene is None:
            self.running = False
            return True
        if next_scene is Scene.GAME:
            logger.info("Game started (first to %d)", self.scoreboard.max_score)
        elif next_scene is Scene.GAME_OVER:
            logger.info("Game over: player %d - enemy %d",
                        self.scoreboard.score(Side.PLAYER), self.scoreboard.score(Side.ENEMY))
        self.scene = next_scene
        return True

    def _check_win(self):
        if self.scene is Scene.GAME and self.scoreboard.any_max():
            self.dispatch(Event.MAX_SCORE)

    def update(self, dt):
        if self.input.close_requested():
            self.running = False
            return

        held = {action for action in ACTIONS if self.input.is_held(action)}
        pressed = held - self._prev_held
        self._prev_held = held

        self._check_win()
        scene = self.scene

        if scene is Scene.GAME:
            self.player.move_by_input(dt, self.input)
            self.enemy.move_by_bot(dt, self.ball.center[1], self.rng)
            self.ball.update(dt)
            self._check_win()

        if self.scene is not scene:
            return
        for action, event in KEY_EVENTS[scene]:
            if action in pressed and self.dispatch(event):
                break

    # Rendering

    def render(self, renderer):
        if self.scene is Scene.MAIN_MENU:
            self.render_main_menu(renderer)
        elif self.scene is Scene.GAME:
            self.render_game(renderer)
        else:
            self.render_game_over(renderer)

    def render_game(self, renderer):
        renderer.draw_rect(self.player.rect, WHITE)
        renderer.draw_rect(self.enemy.rect, WHITE)
        renderer.draw_circle(self.ball.center, self.ball.radius, WHITE)
        renderer.draw_text(str(self.scoreboard.score(Side.PLAYER)), (self.width / 2 - 64, 0), 64, WHITE)
        renderer.draw_text(str(self.scoreboard.score(Side.ENEMY)), (self.width / 2 + 64, 0), 64, WHITE)

    def render_main_menu(self, renderer):
        renderer.draw_text(TITLE, (self.width / 2, self.height / 2), 64, WHITE, centered=True)
        self._render_prompt(renderer, Scene.MAIN_MENU)

    def render_game_over(self, renderer):
        winner = self.scoreboard.winner()
        if winner is not None:
            text = "Winner: %s - %d" % (winner.value.capitalize(), self.scoreboard.score(winner))
            renderer.draw_text(text, (self.width / 2, self.height / 2), 64, WHITE, centered=True)
        self._render_prompt(renderer, Scene.GAME_OVER)

    def _render_prompt(self, renderer, scene):
        text, offset = PROMPTS[scene]
        renderer.draw_text(text, (self.width / 2 - offset, self.height / 2 + 40), 32, self.blink.next_color())


def build_controller(input_source, rng, max_score=MAX_SCORE, width=WIDTH, height=HEIGHT):
    player, enemy = make_paddles(width, height)
    scoreboard = Scoreboard(max_score)
    ball = Ball(player, enemy, scoreboard, rng, width=width, height=height)
    return SceneController(player, enemy, ball, scoreboard, input_source, rng, width, height)
