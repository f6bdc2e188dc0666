# Data models and loaders
