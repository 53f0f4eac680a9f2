"""0.0.1.2026.1019.1200.00"""