BACKGROUND = (40, 44, 52)
GRID_BACKGROUND = (255, 255, 255)
SNAKE_HEAD = (46, 139, 87)
SNAKE_BODY = (60, 179, 113)
SNAKE_OUTLINE = (255, 255, 255)
FOOD = (255, 99, 71)
HUD_TEXT = (255, 255, 255)
OVERLAY = (0, 0, 0, 160)
