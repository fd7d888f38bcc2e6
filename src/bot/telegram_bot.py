#!/usr/bin/env python3
"""
Sentinel FAQ Telegram Bot

Serves the on-site FAQ assistant over Telegram. Every chat gets its own
AssistantSession; answers come back with their provenance as a caption.

Commands:
  /start  - Welcome message and suggested topics
  /reset  - Clear the conversation
  /topics - Show suggested questions

Usage:
  TELEGRAM_BOT_TOKEN=your_token python -m bot.telegram_bot
  FAQ_CONFIG_PATH=config/assistant.defaults.yml (optional)
"""

import logging
import os
import sys
from typing import Dict

from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    filters,
    ContextTypes,
)

from faq.assistant import AssistantSession
from faq.catalog import WELCOME_TEXT
from faq.config import AssistantConfig, build_matcher, load_config
from faq.matcher import FaqMatcher

logging.basicConfig(
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

CONFIG_PATH = os.environ.get("FAQ_CONFIG_PATH", "config/assistant.defaults.yml")

# Sessions keyed by chat id
sessions: Dict[int, AssistantSession] = {}


def get_session(
    chat_id: int, config: AssistantConfig, matcher: FaqMatcher
) -> AssistantSession:
    if chat_id not in sessions:
        session = AssistantSession(
            matcher,
            max_messages=config.transcript.max_messages,
            decision_log=config.decision_log,
        )
        session.reset()
        sessions[chat_id] = session
    return sessions[chat_id]


def format_topics(session: AssistantSession) -> str:
    return "Try asking:\n" + "\n".join(f"- {q}" for q in session.suggestions())


def _session_for(update: Update, context: ContextTypes.DEFAULT_TYPE) -> AssistantSession:
    data = context.application.bot_data
    return get_session(update.effective_chat.id, data["config"], data["matcher"])


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start command."""
    session = _session_for(update, context)
    session.reset()
    await update.message.reply_text(f"{WELCOME_TEXT}\n\n{format_topics(session)}")


async def reset_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /reset command — clear the transcript."""
    session = _session_for(update, context)
    session.reset()
    await update.message.reply_text("Conversation cleared.\n\n" + WELCOME_TEXT)


async def topics_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /topics command."""
    session = _session_for(update, context)
    await update.message.reply_text(format_topics(session))


async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle any text message — answer it from the knowledge base."""
    message = update.message.text
    if not message:
        return

    session = _session_for(update, context)
    result = session.ask(message)
    if result is None:
        return

    await update.message.reply_text(f"{result.text}\n\n({result.provenance})")


def main():
    """Start the bot."""
    token = os.environ.get("TELEGRAM_BOT_TOKEN")
    if not token:
        logger.error("TELEGRAM_BOT_TOKEN not set")
        sys.exit(1)

    config = load_config(CONFIG_PATH)
    matcher = build_matcher(config)
    logger.info(
        "Starting Sentinel FAQ bot (%d entries, threshold %d)",
        len(matcher.knowledge_base), matcher.threshold,
    )

    app = Application.builder().token(token).build()
    app.bot_data["config"] = config
    app.bot_data["matcher"] = matcher

    # Commands
    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("reset", reset_command))
    app.add_handler(CommandHandler("topics", topics_command))

    # All text messages
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_message))

    logger.info("Bot is running. Polling for messages...")
    app.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
