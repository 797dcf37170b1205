import pygame


def render_text(screen: pygame.Surface, text: str, font, color,
                pos: tuple[int, int], *, center: bool = False) -> pygame.Rect:
    """Blit one line of text; *pos* is top-left, or the centre when asked."""
    if not text:
        return pygame.Rect(pos, (0, 0))
    surf = font.render(text, True, color)
    rect = surf.get_rect(center=pos) if center else surf.get_rect(topleft=pos)
    screen.blit(surf, rect)
    return rect


def render_progress_bar(screen: pygame.Surface, rect: pygame.Rect,
                        fraction: float, label: str, theme, font) -> None:
    """
    Filled bar for *fraction* (clamped to 0‥1) with *label* centred on top.
    """
    fraction = min(1.0, max(0.0, fraction))
    pygame.draw.rect(screen, theme.color("progress_bar_background"), rect)
    if fraction > 0:
        filled = pygame.Rect(rect.x, rect.y, int(rect.width * fraction), rect.height)
        pygame.draw.rect(screen, theme.color("progress_bar_filled"), filled)
    if label:
        render_text(screen, label, font, theme.color("progress_bar_text"),
                    rect.center, center=True)


def render_button(screen: pygame.Surface, rect: pygame.Rect,
                  label: str, theme, font) -> pygame.Rect:
    pygame.draw.rect(screen, theme.color("button"), rect, border_radius=4)
    render_text(screen, label, font, theme.color("button_text"),
                rect.center, center=True)
    return rect
