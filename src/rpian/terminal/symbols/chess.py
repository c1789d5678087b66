"""Chess piece glyphs."""

from __future__ import annotations

from enum import Enum


class ChessPieceSymbol(str, Enum):
    WHITE_KING = "♔"  # U+2654
    WHITE_QUEEN = "♕"  # U+2655
    WHITE_ROOK = "♖"  # U+2656
    WHITE_BISHOP = "♗"  # U+2657
    WHITE_KNIGHT = "♘"  # U+2658
    WHITE_PAWN = "♙"  # U+2659
    BLACK_KING = "♚"  # U+265A
    BLACK_QUEEN = "♛"  # U+265B
    BLACK_ROOK = "♜"  # U+265C
    BLACK_BISHOP = "♝"  # U+265D
    BLACK_KNIGHT = "♞"  # U+265E
    BLACK_PAWN = "♟"  # U+265F


def is_white_piece(piece: ChessPieceSymbol) -> bool:
    return piece.name.startswith("WHITE_")


def opposite_color_piece(piece: ChessPieceSymbol) -> ChessPieceSymbol:
    """Same piece, other side."""
    color, kind = piece.name.split("_", 1)
    other = "BLACK" if color == "WHITE" else "WHITE"
    return ChessPieceSymbol[f"{other}_{kind}"]
