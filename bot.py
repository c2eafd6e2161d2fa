"""Telegram front end: play Tic-Tac-Toe against the bot in any chat."""

from __future__ import annotations

import logging
from typing import Dict, Hashable, Tuple

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Update
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    ContextTypes,
)

from board import Cell
from config import Settings, load_settings, parse_difficulty
from game import STATUS_MESSAGES, SYMBOLS, GameSession, cell_handle
from outcome import GameStatus
from strategy import Difficulty, new_session

logger = logging.getLogger(__name__)

STATUS_ICONS = {
    GameStatus.PLAYER_WON: "🏆",
    GameStatus.BOT_WON: "🤖",
    GameStatus.DRAW: "🤝",
}


class ChatRenderer:
    """What the chat currently shows: the marks placed and the last status."""

    def __init__(self):
        self.cells: Dict[Hashable, Cell] = {}
        self.status = GameStatus.IN_PROGRESS

    def mark_cell(self, handle: Hashable, mark: Cell) -> None:
        self.cells[handle] = mark

    def show_status(self, status: GameStatus) -> None:
        self.status = status

    def cell(self, row: int, col: int) -> Cell:
        return self.cells.get(cell_handle(row, col), Cell.EMPTY)


# ─── Helpers ────────────────────────────────────────────────


def get_settings(context: ContextTypes.DEFAULT_TYPE) -> Settings:
    settings = context.bot_data.get("settings")
    if settings is None:
        settings = Settings(token=None)
    return settings


def start_game(context: ContextTypes.DEFAULT_TYPE, difficulty: Difficulty) -> GameSession:
    """Create a fresh game for this chat and remember it."""
    settings = get_settings(context)
    game = new_session(
        difficulty,
        renderer=ChatRenderer(),
        easy_random_rate=settings.easy_random_rate,
    )
    context.chat_data["game"] = game
    context.chat_data["difficulty"] = difficulty
    return game


def parse_move_data(data: str) -> Tuple[int, int]:
    """Turn ``move_<row>_<col>`` into coordinates, rejecting anything off the board."""
    try:
        prefix, row_str, col_str = data.split("_")
        row, col = int(row_str), int(col_str)
    except ValueError:
        raise ValueError(f"Malformed move data {data!r}") from None
    if prefix != "move" or not (0 <= row <= 2 and 0 <= col <= 2):
        raise ValueError(f"Move outside the board: {data!r}")
    return row, col


def build_board_keyboard(renderer: ChatRenderer) -> InlineKeyboardMarkup:
    """3x3 board; taken cells and finished games get no-op buttons."""
    game_over = renderer.status.is_terminal
    keyboard = []
    for row in range(3):
        row_buttons = []
        for col in range(3):
            cell = renderer.cell(row, col)
            if game_over or cell != Cell.EMPTY:
                callback_data = f"noop_{row}_{col}"
            else:
                callback_data = f"move_{row}_{col}"
            row_buttons.append(InlineKeyboardButton(SYMBOLS[cell], callback_data=callback_data))
        keyboard.append(row_buttons)
    if game_over:
        keyboard.append([InlineKeyboardButton("Play Again", callback_data="play_again")])
    return InlineKeyboardMarkup(keyboard)


def status_text(renderer: ChatRenderer, difficulty: Difficulty) -> str:
    """Generate the status text shown above the board."""
    if renderer.status.is_terminal:
        return f"{STATUS_ICONS[renderer.status]} {STATUS_MESSAGES[renderer.status]}"
    return f"Tic-Tac-Toe ({difficulty.value})\n\n{SYMBOLS[Cell.PLAYER]} Your turn"


# ─── Command Handler ────────────────────────────────────────


async def tictactoe_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /tictactoe [easy|hard] - start a new game."""
    if context.args:
        try:
            difficulty = parse_difficulty(context.args[0])
        except ValueError:
            await update.message.reply_text("Usage: /tictactoe [easy|hard]")
            return
    else:
        difficulty = get_settings(context).difficulty

    game = start_game(context, difficulty)
    logger.info("New %s game in chat %s", difficulty.value, update.effective_chat.id)
    await update.message.reply_text(
        status_text(game.renderer, difficulty),
        reply_markup=build_board_keyboard(game.renderer),
    )


# ─── Callback Query Handler ─────────────────────────────────


async def callback_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle all inline keyboard button presses."""
    query = update.callback_query
    data = query.data

    # ── Play Again ──
    if data == "play_again":
        await query.answer()
        difficulty = context.chat_data.get("difficulty", get_settings(context).difficulty)
        game = start_game(context, difficulty)
        await query.edit_message_text(
            status_text(game.renderer, difficulty),
            reply_markup=build_board_keyboard(game.renderer),
        )
        return

    # ── No-op cells (game over or already taken) ──
    if data.startswith("noop_"):
        await query.answer()
        return

    game = context.chat_data.get("game")
    if game is None:
        await query.answer("No active game. Use /tictactoe to start one.", show_alert=True)
        return

    try:
        row, col = parse_move_data(data)
    except ValueError:
        logger.warning("Ignoring callback data %r", data)
        await query.answer("Invalid move!", show_alert=True)
        return

    if not game.request_move(row, col, cell_handle(row, col)):
        await query.answer("Invalid move!", show_alert=True)
        return

    await query.answer()
    difficulty = context.chat_data.get("difficulty", Difficulty.EASY)
    await query.edit_message_text(
        status_text(game.renderer, difficulty),
        reply_markup=build_board_keyboard(game.renderer),
    )


# ─── Main ───────────────────────────────────────────────────


def main() -> None:
    """Start the bot."""
    settings = load_settings()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level,
    )

    if not settings.token:
        logger.error("BOT_TOKEN not found! Set it in .env file.")
        return

    app = Application.builder().token(settings.token).build()
    app.bot_data["settings"] = settings

    # Register handlers
    app.add_handler(CommandHandler("tictactoe", tictactoe_command))
    app.add_handler(CallbackQueryHandler(callback_handler))

    logger.info("Bot is starting (default difficulty: %s)...", settings.difficulty.value)
    app.run_polling(allowed_updates=["message", "callback_query"])


if __name__ == "__main__":
    main()
