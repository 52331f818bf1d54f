"""
Estilo de questionary basado en el tema actual.
"""

from questionary import Style

from dynaform.cli.theme import get_palette


def get_prompt_style() -> Style:
    """Estilo de los prompts coherente con la paleta activa."""
    p = get_palette()
    return Style([
        ('qmark', f'fg:{p.accent} bold'),
        ('question', 'bold'),
        ('answer', f'fg:{p.success} bold'),
        ('pointer', f'fg:{p.primary} bold'),
        ('highlighted', f'fg:{p.primary} bold'),
        ('selected', f'fg:{p.success} bold'),
        ('instruction', f'fg:{p.muted} italic'),
        ('text', ''),
        ('disabled', f'fg:{p.muted} italic'),
        ('separator', f'fg:{p.border}'),
    ])
