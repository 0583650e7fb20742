"""
Paddles, ball and scoreboard for Pong.

These classes hold no pygame display state; pygame.Rect is only used for
collision boxes and drawing, so everything here runs headless.
"""
from enum import Enum

import pygame

WIDTH, HEIGHT = 1280, 720
PADDLE_W, PADDLE_H = 16, 64
BALL_RADIUS = 16
BALL_SPEED = 320.0
PADDLE_SPEED = BALL_SPEED
MAX_SCORE = 5

# Bot reacts to the ball when its draw is above this, otherwise it jitters
BOT_REACT_THRESHOLD = 0.2


class Side(Enum):
    PLAYER = "player"
    ENEMY = "enemy"


class Scoreboard:
    def __init__(self, max_score=MAX_SCORE):
        self.max_score = max_score
        self.scores = {Side.PLAYER: 0, Side.ENEMY: 0}

    def score(self, side):
        return self.scores[side]

    def increment(self, side):
        self.scores[side] = min(self.scores[side] + 1, self.max_score)

    def reset(self):
        for side in self.scores:
            self.scores[side] = 0

    def is_max(self, side):
        return self.scores[side] == self.max_score

    def any_max(self):
        return self.is_max(Side.PLAYER) or self.is_max(Side.ENEMY)

    def winner(self):
        for side in (Side.PLAYER, Side.ENEMY):
            if self.is_max(side):
                return side
        return None


class Paddle:
    def __init__(self, x, y, width=PADDLE_W, height=PADDLE_H, speed=PADDLE_SPEED, bounds_height=HEIGHT):
        self.home = (float(x), float(y))
        self.x, self.y = self.home
        self.width = width
        self.height = height
        self.speed = speed
        self.bounds_height = bounds_height

    @property
    def top(self):
        return self.y

    @property
    def bottom(self):
        return self.y + self.height

    @property
    def centery(self):
        return self.y + self.height / 2

    @property
    def rect(self):
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def move(self, dy):
        self.y = max(0.0, min(self.y + dy, self.bounds_height - self.height))

    def move_by_input(self, dt, input_source):
        step = self.speed * dt * 2
        if input_source.is_held("up") and self.top > 0:
            self.move(-step)
        if input_source.is_held("down") and self.bottom < self.bounds_height:
            self.move(step)

    def move_by_bot(self, dt, ball_centery, rng):
        r = float(rng.uniform(-1.0, 1.0))
        if r > BOT_REACT_THRESHOLD:
            # One step toward the ball, not a full catch-up
            if self.centery < ball_centery and self.bottom < self.bounds_height:
                self.move(self.speed * dt)
            elif self.centery > ball_centery and self.top > 0:
                self.move(-self.speed * dt)
        else:
            self.move(r * self.speed * dt)

    def reset(self):
        self.x, self.y = self.home


class Ball:
    """
    Circle moving at constant speed; collides as its enclosing square.

    Direction components are always -1 or +1, so the speed magnitude never
    changes. There is no swept collision: with a large dt the ball can pass
    through a paddle in one step.
    """

    def __init__(self, player, enemy, scoreboard, rng, radius=BALL_RADIUS, speed=BALL_SPEED,
                 width=WIDTH, height=HEIGHT):
        self.player = player
        self.enemy = enemy
        self.scoreboard = scoreboard
        self.rng = rng
        self.radius = radius
        self.speed = speed
        self.width = width
        self.height = height
        self.dx, self.dy = 1, 1
        self.reset()

    @property
    def diameter(self):
        return self.radius * 2

    @property
    def center(self):
        return (self.x + self.radius, self.y + self.radius)

    @property
    def rect(self):
        return pygame.Rect(self.x, self.y, self.diameter, self.diameter)

    def is_colliding(self, paddle):
        return self.rect.colliderect(paddle.rect)

    def update(self, dt):
        # Paddles: only turn around when heading into the paddle
        if self.is_colliding(self.player) and self.dx < 0:
            self.dx = 1
        elif self.is_colliding(self.enemy) and self.dx > 0:
            self.dx = -1

        # Walls
        if self.y <= 0 and self.dy < 0:
            self.dy = 1
        elif self.y + self.diameter >= self.height and self.dy > 0:
            self.dy = -1

        self.x += self.speed * 2 * self.dx * dt
        self.y += self.speed * 2 * self.dy * dt

        # Score
        if self.x < 0:
            self.scoreboard.increment(Side.ENEMY)
            self.reset()
        elif self.x + self.diameter > self.width:
            self.scoreboard.increment(Side.PLAYER)
            self.reset()

        if self.scoreboard.any_max():
            self.player.reset()
            self.enemy.reset()

    def reset(self):
        self.x = self.width / 2
        self.y = self.height / 2
        self.dx = int(self.rng.choice([-1, 1]))
        self.dy = int(self.rng.choice([-1, 1]))


def make_paddles(width=WIDTH, height=HEIGHT):
    player = Paddle(10, height // 2 - PADDLE_W, bounds_height=height)
    enemy = Paddle(width - PADDLE_W - 10, height // 2 - PADDLE_W, bounds_height=height)
    return player, enemy
