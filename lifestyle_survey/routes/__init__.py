# Blueprints: survey form, results, JSON API, and fallbacks
