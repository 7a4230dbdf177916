# Core modules for VibeTune backend
