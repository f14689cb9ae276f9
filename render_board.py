"""
Render 2048 boards as images and animated GIFs.
Boards hold exponents, so colors are looked up by exponent rather than value.
"""

import io
import json
import os

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from PIL import Image

from game_2048 import tile_value


BACKGROUND_COLOR = '#BBADA0'
FIGURE_COLOR = '#FAF8EF'

# Tile colors indexed by exponent; anything past the end uses the last color
TILE_COLORS = [
    '#CDC1B4',  # empty
    '#EEE4DA',  # 2
    '#EDE0C8',  # 4
    '#F2B179',  # 8
    '#F59563',  # 16
    '#F67C5F',  # 32
    '#F65E3B',  # 64
    '#EDCF72',  # 128
    '#EDCC61',  # 256
    '#EDC850',  # 512
    '#EDC53F',  # 1024
    '#EDC22E',  # 2048
    '#3C3A32',  # 4096+
]

# Text colors indexed by exponent - 1
TEXT_COLORS = ['#776E65', '#776E65', '#F9F6F2']


def get_tile_color(exponent):
    """Get the background color for a tile exponent."""
    return TILE_COLORS[min(exponent, len(TILE_COLORS) - 1)]


def get_text_color(exponent):
    """Get the text color for a tile exponent (None for an empty cell)."""
    if exponent <= 0:
        return None
    return TEXT_COLORS[min(exponent - 1, len(TEXT_COLORS) - 1)]


def render_board(board, ax, move_num=None, action=None):
    """Draw a board of any size on a matplotlib axis."""
    rows, cols = len(board), len(board[0])
    ax.clear()
    ax.set_xlim(0, cols)
    ax.set_ylim(0, rows)
    ax.set_aspect('equal')
    ax.axis('off')

    for i in range(rows):
        for j in range(cols):
            exponent = board[i][j]

            rect = mpatches.Rectangle((j, rows - 1 - i), 1, 1,
                                      facecolor=get_tile_color(exponent),
                                      edgecolor=BACKGROUND_COLOR,
                                      linewidth=3)
            ax.add_patch(rect)

            if exponent > 0:
                value = tile_value(exponent)
                fontsize = 40 if value < 100 else (32 if value < 1000 else 24)
                ax.text(j + 0.5, rows - 1 - i + 0.5, str(value),
                        ha='center', va='center',
                        fontsize=fontsize, fontweight='bold',
                        color=get_text_color(exponent))

    if move_num is not None or action is not None:
        info_text = f"Move: {move_num} | Action: {action}"
        ax.text(cols / 2, -0.3, info_text, ha='center', va='top',
                fontsize=14, fontweight='bold', color=TEXT_COLORS[0])


def _figure_to_image(fig):
    buf = io.BytesIO()
    fig.savefig(buf, format='png', bbox_inches='tight', dpi=100,
                facecolor=FIGURE_COLOR, edgecolor='none')
    buf.seek(0)
    image = Image.open(buf).copy()
    buf.close()
    return image


def board_to_image(board, move_num=None, action=None):
    """Render a single board to a PIL image."""
    fig, ax = plt.subplots(figsize=(6, 6.5))
    try:
        render_board(board, ax, move_num, action)
        return _figure_to_image(fig)
    finally:
        plt.close(fig)


def load_game_states(log_file):
    """Load all frames from a game controller log."""
    with open(log_file, 'r') as f:
        data = json.load(f)

    states = []
    for entry in data:
        if 'game_state' in entry:
            states.append({
                'state': entry['game_state'],
                'action': entry.get('action', 'UNKNOWN'),
                'move_num': entry.get('move_number', len(states)),
            })

    return states


def create_gif(log_file, output_file, fps=2, max_frames=None):
    """
    Create an animated GIF from a game log.

    Args:
        log_file: JSON log written by GameController.save_log
        output_file: Path of the GIF to write
        fps: Frames per second
        max_frames: Sample this many frames evenly when the log is longer

    Returns:
        output_file, or None when the log holds no frames
    """
    states = load_game_states(log_file)

    if not states:
        print(f"  No states found in {log_file}")
        return None

    if max_frames and len(states) > max_frames:
        indices = np.linspace(0, len(states) - 1, max_frames, dtype=int)
        states = [states[i] for i in indices]

    frames = []
    fig, ax = plt.subplots(figsize=(6, 6.5))
    try:
        for state_info in states:
            render_board(state_info['state'], ax, state_info['move_num'], state_info['action'])
            frames.append(_figure_to_image(fig))
    finally:
        plt.close(fig)

    output_dir = os.path.dirname(output_file)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    duration = int(1000 / fps)
    frames[0].save(
        output_file,
        save_all=True,
        append_images=frames[1:],
        duration=duration,
        loop=0
    )

    print(f"  ✓ Saved {output_file} ({len(frames)} frames)")
    return output_file


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description='Create an animated GIF of a 2048 game')
    parser.add_argument('--log_file', type=str, default='game_logs/game_log.json',
                        help='JSON game log written by play_2048.py')
    parser.add_argument('--output', type=str, default='gifs/game.gif',
                        help='Path of the GIF to write')
    parser.add_argument('--fps', type=int, default=2,
                        help='Frames per second for GIF animation')
    parser.add_argument('--max_frames', type=int, default=None,
                        help='Maximum number of frames (samples evenly if exceeded)')

    args = parser.parse_args()

    try:
        create_gif(args.log_file, args.output, args.fps, args.max_frames)
    except (OSError, json.JSONDecodeError) as e:
        print(f"  ✗ Error creating GIF from {args.log_file}: {e}")
