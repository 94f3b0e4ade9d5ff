"""Beach Map - Interactive beach swimmability map backed by a REST service."""
