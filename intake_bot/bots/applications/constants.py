"""User-facing texts and identifiers for the application bot."""
from __future__ import annotations

APPLY_BUTTON_LABEL = "📝 Leave an application"
APPLY_CALLBACK_DATA = "apply"

START_COMMAND = "start"
APPLY_COMMAND = "apply"

BOT_COMMANDS = [
    (START_COMMAND, "Show the welcome message"),
    (APPLY_COMMAND, "Leave an application"),
]

WELCOME_TEXT = (
    "👋 Welcome!\n\n"
    "We are a team building turnkey IT solutions.\n"
    "Leave an application and we will suggest how to bring your project to life.\n\n"
    "🚀 Ready to start?"
)
PROMPT_TEXT = "✍️ Describe your task and we will suggest a solution:"
ALREADY_AWAITING_TEXT = "You are already leaving an application. Describe your task."
EMPTY_TEXT = "✍️ The application can't be empty. Please describe your task:"
GUIDANCE_TEXT = "❗️ Please use the menu or the button below."
CONFIRMATION_TEXT = "✅ Your application has been received. We will contact you!"
PERSISTENCE_FAILED_TEXT = "❌ Could not save your application. Please try again later."
RATE_LIMITED_TEXT = "⏱ Please wait {seconds} sec. before sending another application."

FORWARD_TEMPLATE = "📨 New application from {author}:\n\n{text}"

PRIVATE_CHAT = "private"
