"""Pink Beam service layer: full-text search, notifications, and transactional email."""
