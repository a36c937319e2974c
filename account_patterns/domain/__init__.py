"""Domain layer - account products and shared exceptions."""
