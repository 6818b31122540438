"""Directory and placeholder layout of a scaffolded Express.js project.

All paths are POSIX-style and relative to the target root.  The directory
list doubles as the "already scaffolded" signal checked by the existence
guard.
"""

from __future__ import annotations

DIRECTORIES: tuple[str, ...] = (
    "src/config",
    "src/controllers",
    "src/middlewares",
    "src/models",
    "src/routes",
    "src/services",
    "src/utils",
    "src/views",
    "public/css",
    "public/js",
    "public/images",
)

PLACEHOLDER_FILES: tuple[str, ...] = (
    "src/config/database.js",
    "src/config/dotenv.js",
    "src/controllers/userController.js",
    "src/controllers/authController.js",
    "src/middlewares/authMiddleware.js",
    "src/models/User.js",
    "src/routes/userRoutes.js",
    "src/routes/authRoutes.js",
    "src/routes/index.js",
    "src/utils/helpers.js",
    "src/app.js",
    "src/server.js",
    ".env",
    ".gitignore",
    "README.md",
)
