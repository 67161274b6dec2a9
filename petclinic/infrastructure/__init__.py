"""Infrastructure layer - storage backends and service wiring."""
