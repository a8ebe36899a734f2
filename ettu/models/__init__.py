"""Data models for users, projects, notes, tasks, snippets and API envelopes."""