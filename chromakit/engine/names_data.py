# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Reference table for color naming.

Each entry is a name with its OKLCH coordinates (L 0-1, C, H degrees) and
category tags: a hue family ("red", "gray", ...) plus "light" or "dark" at
the ends of the lightness scale. The table covers the hue circle in every
family and the achromatic axis from black to white.
"""

from __future__ import annotations

from chromakit.schema import NameEntry


def _e(name: str, L: float, C: float, H: float, *tags: str) -> NameEntry:
    return NameEntry(name, float(L), float(C), float(H), tags)


COLOR_NAMES: tuple[NameEntry, ...] = (
    # Achromatic
    _e("Black", 0.0, 0.0, 0, "gray", "dark"),
    _e("Charcoal", 0.25, 0.01, 0, "gray", "dark"),
    _e("Dark Gray", 0.35, 0.01, 0, "gray", "dark"),
    _e("Gray", 0.5, 0.01, 0, "gray"),
    _e("Silver", 0.7, 0.01, 0, "gray"),
    _e("Light Gray", 0.8, 0.01, 0, "gray", "light"),
    _e("Smoke", 0.85, 0.01, 0, "gray", "light"),
    _e("White", 1.0, 0.0, 0, "gray", "light"),

    # Reds
    _e("Maroon", 0.3, 0.12, 30, "red", "dark"),
    _e("Crimson", 0.45, 0.21, 28, "red"),
    _e("Red", 0.55, 0.26, 30, "red"),
    _e("Scarlet", 0.5, 0.24, 32, "red"),
    _e("Fire Brick", 0.4, 0.18, 28, "red"),
    _e("Cherry", 0.42, 0.2, 25, "red"),
    _e("Rose", 0.65, 0.18, 28, "red"),
    _e("Salmon", 0.72, 0.14, 35, "red"),
    _e("Coral", 0.68, 0.16, 38, "red"),
    _e("Tomato", 0.58, 0.22, 32, "red"),
    _e("Brick", 0.42, 0.15, 30, "red"),
    _e("Ruby", 0.48, 0.22, 28, "red"),

    # Oranges
    _e("Rust", 0.45, 0.14, 55, "orange"),
    _e("Burnt Orange", 0.48, 0.16, 58, "orange"),
    _e("Orange", 0.7, 0.2, 60, "orange"),
    _e("Tangerine", 0.72, 0.19, 62, "orange"),
    _e("Pumpkin", 0.65, 0.18, 58, "orange"),
    _e("Peach", 0.8, 0.12, 60, "orange", "light"),
    _e("Apricot", 0.78, 0.13, 62, "orange"),
    _e("Amber", 0.68, 0.17, 65, "orange"),
    _e("Copper", 0.55, 0.15, 58, "orange"),

    # Yellows
    _e("Gold", 0.72, 0.16, 90, "yellow"),
    _e("Mustard", 0.65, 0.14, 92, "yellow"),
    _e("Yellow", 0.9, 0.2, 95, "yellow", "light"),
    _e("Lemon", 0.92, 0.19, 98, "yellow", "light"),
    _e("Canary", 0.88, 0.18, 93, "yellow", "light"),
    _e("Butter", 0.85, 0.14, 95, "yellow", "light"),
    _e("Cream", 0.92, 0.08, 95, "yellow", "light"),
    _e("Ivory", 0.95, 0.05, 92, "yellow", "light"),
    _e("Khaki", 0.75, 0.09, 90, "yellow"),
    _e("Honey", 0.72, 0.13, 88, "yellow"),

    # Greens
    _e("Olive", 0.5, 0.08, 115, "green"),
    _e("Chartreuse", 0.8, 0.16, 125, "green", "light"),
    _e("Lime", 0.85, 0.18, 130, "green", "light"),
    _e("Yellow Green", 0.78, 0.15, 128, "green"),
    _e("Dark Green", 0.35, 0.12, 152, "green", "dark"),
    _e("Forest Green", 0.42, 0.13, 155, "green"),
    _e("Green", 0.6, 0.16, 150, "green"),
    _e("Emerald", 0.58, 0.17, 158, "green"),
    _e("Jade", 0.65, 0.14, 160, "green"),
    _e("Sea Green", 0.55, 0.12, 162, "green"),
    _e("Mint", 0.82, 0.1, 155, "green", "light"),
    _e("Sage", 0.68, 0.08, 152, "green"),
    _e("Moss", 0.52, 0.1, 148, "green"),
    _e("Fern", 0.58, 0.13, 150, "green"),

    # Cyans
    _e("Teal", 0.52, 0.12, 200, "cyan"),
    _e("Cyan", 0.8, 0.14, 210, "cyan", "light"),
    _e("Turquoise", 0.72, 0.12, 205, "cyan"),
    _e("Aqua", 0.82, 0.13, 210, "cyan", "light"),
    _e("Aquamarine", 0.78, 0.11, 208, "cyan"),
    _e("Light Blue", 0.8, 0.09, 215, "cyan", "light"),

    # Blues
    _e("Navy", 0.25, 0.08, 270, "blue", "dark"),
    _e("Dark Blue", 0.35, 0.12, 272, "blue", "dark"),
    _e("Midnight Blue", 0.28, 0.09, 268, "blue", "dark"),
    _e("Royal Blue", 0.48, 0.18, 275, "blue"),
    _e("Blue", 0.55, 0.2, 270, "blue"),
    _e("Cobalt", 0.5, 0.19, 272, "blue"),
    _e("Sapphire", 0.45, 0.17, 268, "blue"),
    _e("Sky Blue", 0.75, 0.11, 265, "blue"),
    _e("Azure", 0.72, 0.12, 268, "blue"),
    _e("Cornflower Blue", 0.68, 0.14, 270, "blue"),
    _e("Steel Blue", 0.58, 0.1, 265, "blue"),
    _e("Powder Blue", 0.82, 0.08, 268, "blue", "light"),
    _e("Baby Blue", 0.85, 0.09, 270, "blue", "light"),
    _e("Periwinkle", 0.72, 0.11, 275, "blue"),

    # Purples
    _e("Indigo", 0.42, 0.15, 290, "purple"),
    _e("Slate Blue", 0.55, 0.13, 288, "purple"),
    _e("Purple", 0.48, 0.18, 310, "purple"),
    _e("Violet", 0.52, 0.19, 305, "purple"),
    _e("Plum", 0.55, 0.14, 312, "purple"),
    _e("Eggplant", 0.38, 0.12, 308, "purple"),
    _e("Amethyst", 0.58, 0.16, 310, "purple"),
    _e("Lavender", 0.75, 0.11, 305, "purple"),
    _e("Lilac", 0.72, 0.1, 308, "purple"),
    _e("Orchid", 0.68, 0.14, 312, "purple"),
    _e("Mauve", 0.65, 0.09, 310, "purple"),
    _e("Thistle", 0.78, 0.08, 305, "purple"),

    # Pinks
    _e("Magenta", 0.6, 0.22, 340, "pink"),
    _e("Fuchsia", 0.58, 0.21, 338, "pink"),
    _e("Hot Pink", 0.65, 0.19, 345, "pink"),
    _e("Pink", 0.8, 0.12, 340, "pink", "light"),
    _e("Rose Pink", 0.72, 0.14, 335, "pink"),
    _e("Blush", 0.82, 0.09, 338, "pink", "light"),
    _e("Bubblegum", 0.78, 0.13, 342, "pink"),
    _e("Carnation", 0.75, 0.12, 340, "pink"),

    # Browns
    _e("Brown", 0.4, 0.08, 55, "brown"),
    _e("Chocolate", 0.35, 0.09, 52, "brown", "dark"),
    _e("Sienna", 0.42, 0.11, 48, "brown"),
    _e("Chestnut", 0.45, 0.1, 50, "brown"),
    _e("Mahogany", 0.38, 0.09, 45, "brown"),
    _e("Tan", 0.68, 0.07, 58, "brown"),
    _e("Beige", 0.8, 0.05, 60, "brown", "light"),
    _e("Sand", 0.75, 0.06, 62, "brown"),
    _e("Taupe", 0.58, 0.04, 55, "brown"),
    _e("Coffee", 0.32, 0.08, 52, "brown", "dark"),
    _e("Mocha", 0.48, 0.09, 55, "brown"),
    _e("Caramel", 0.58, 0.11, 58, "brown"),
    _e("Cinnamon", 0.52, 0.1, 54, "brown"),

    # Food and nature
    _e("Burgundy", 0.35, 0.13, 25, "red", "dark"),
    _e("Wine", 0.32, 0.12, 22, "red", "dark"),
    _e("Raspberry", 0.48, 0.18, 335, "pink"),
    _e("Strawberry", 0.58, 0.19, 28, "red"),
    _e("Watermelon", 0.65, 0.17, 32, "red"),
    _e("Grape", 0.45, 0.14, 308, "purple"),
    _e("Blueberry", 0.42, 0.15, 275, "blue"),
    _e("Lemon Chiffon", 0.94, 0.1, 96, "yellow", "light"),
    _e("Papaya", 0.78, 0.14, 62, "orange"),
    _e("Mango", 0.75, 0.16, 68, "orange"),
    _e("Cantaloupe", 0.72, 0.15, 60, "orange"),
    _e("Avocado", 0.55, 0.09, 118, "green"),
    _e("Kiwi", 0.65, 0.12, 135, "green"),
    _e("Pistachio", 0.72, 0.1, 145, "green"),
    _e("Mint Cream", 0.92, 0.05, 160, "green", "light"),
    _e("Sea Foam", 0.85, 0.08, 170, "cyan", "light"),
    _e("Ocean Blue", 0.48, 0.13, 258, "blue"),
    _e("Denim", 0.52, 0.11, 268, "blue"),
    _e("Prussian Blue", 0.32, 0.11, 272, "blue", "dark"),
    _e("Electric Blue", 0.58, 0.21, 275, "blue"),
    _e("Cerulean", 0.62, 0.14, 265, "blue"),
    _e("Peacock Blue", 0.52, 0.14, 225, "cyan"),
    _e("Ice Blue", 0.88, 0.06, 268, "blue", "light"),

    # Web primaries and CSS anchors
    _e("Pure Red", 0.628, 0.2577, 29.23, "red"),
    _e("Pure Green", 0.8664, 0.2948, 142.5, "green", "light"),
    _e("Pure Blue", 0.452, 0.3132, 264.05, "blue"),
    _e("Pure Yellow", 0.968, 0.211, 109.77, "yellow", "light"),
    _e("Electric Cyan", 0.9054, 0.1546, 194.77, "cyan", "light"),
    _e("Electric Magenta", 0.7017, 0.3225, 328.36, "pink"),
    _e("Web Orange", 0.7927, 0.1709, 70.67, "orange"),
    _e("Rebecca Purple", 0.4403, 0.1603, 303.37, "purple"),
    _e("Deep Pink", 0.65, 0.25, 358, "pink"),
    _e("Dodger Blue", 0.65, 0.19, 252, "blue"),
    _e("Spring Green", 0.87, 0.22, 153, "green", "light"),
    _e("Dark Orange", 0.74, 0.18, 56, "orange"),
    _e("Indian Red", 0.6, 0.13, 22, "red"),
    _e("Olive Drab", 0.56, 0.11, 125, "green"),
    _e("Slate Gray", 0.6, 0.03, 250, "gray"),
    _e("Gunmetal", 0.32, 0.02, 250, "gray", "dark"),
    _e("Jet Black", 0.15, 0.0, 0, "gray", "dark"),
    _e("Dim Gray", 0.6, 0.0, 0, "gray"),
    _e("Gainsboro", 0.9, 0.0, 0, "gray", "light"),
    _e("Off White", 0.97, 0.005, 90, "gray", "light"),
    _e("Midnight", 0.2, 0.05, 280, "blue", "dark"),
)
