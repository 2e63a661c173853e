"""Agent runtime: tool-calling loop over a chat model, with per-thread memory."""
