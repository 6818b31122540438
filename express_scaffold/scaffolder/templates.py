"""Fixed starter content for the generated Express.js project.

Every entry of :data:`TEMPLATE_FILES` is written verbatim on each scaffold
run, replacing whatever the file held before.  There is no substitution:
``${PORT}`` in ``src/server.js`` is JavaScript, not a placeholder.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

INDEX_ROUTES_TEMPLATE = """import { Router } from 'express';
const router = Router();

// Default route
router.get('/', (req, res) => {
    res.send('Hello World');
});

export default router;
"""

APP_TEMPLATE = """import express from 'express';
import indexRoutes from './routes/index.js';

const app = express();

// Middleware
app.use(express.json());

// Routes
app.use('/', indexRoutes);

export default app;
"""

SERVER_TEMPLATE = """import app from './app.js';

const PORT = process.env.PORT || 3000;

app.listen(PORT, () => {
    console.log(`Server is running on http://localhost:${PORT}`);
});
"""

ENV_TEMPLATE = """PORT=3000
DATABASE_URL=mongodb://localhost:27017/express-app
SECRET_KEY=change-me
"""

GITIGNORE_TEMPLATE = """# Dependencies
node_modules/

# Environment
.env
.env.local

# Logs
logs/
*.log
npm-debug.log*

# Build output
dist/
build/
coverage/

# Editors and OS files
.vscode/
.idea/
.DS_Store
"""

TEMPLATE_FILES: Mapping[str, str] = MappingProxyType(
    {
        "src/routes/index.js": INDEX_ROUTES_TEMPLATE,
        "src/app.js": APP_TEMPLATE,
        "src/server.js": SERVER_TEMPLATE,
        ".env": ENV_TEMPLATE,
        ".gitignore": GITIGNORE_TEMPLATE,
    }
)
