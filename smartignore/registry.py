# registry.py
"""
Static lookup tables: which marker files imply which stacks, how stacks are
named by the remote template providers, and which stacks gitignore.io accepts.

Everything here is read-only after import.
"""
from types import MappingProxyType
from typing import Mapping, Tuple

# Hidden entries the scanner keeps because they identify a stack.
ALLOWED_HIDDEN: Tuple[str, ...] = (
    ".env", ".env.local", ".env.development", ".env.production",
    ".idea", ".vscode", ".dockerignore", ".ruby-version",
    ".eclipse", ".settings", ".project", ".classpath",
)

DETECTION_MAP: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    # Java & build tools
    "pom.xml": ("java", "maven"),
    "build.gradle": ("gradle",),
    "build.gradle.kts": ("gradle",),
    "settings.gradle": ("gradle",),
    "settings.gradle.kts": ("gradle",),
    "gradlew": ("gradle",),
    "gradlew.bat": ("gradle",),

    # Node.js (npm and pnpm are covered by node)
    "package.json": ("node",),
    "yarn.lock": ("node", "yarn"),
    "pnpm-lock.yaml": ("node",),
    "package-lock.json": ("node",),
    "node_modules": ("node",),

    # Docker
    "Dockerfile": ("docker",),
    "docker-compose.yml": ("docker",),
    "docker-compose.yaml": ("docker",),
    ".dockerignore": ("docker",),

    # Ruby
    "Gemfile": ("ruby",),
    "Gemfile.lock": ("ruby",),
    ".ruby-version": ("ruby",),
    "Rakefile": ("ruby",),

    # Python
    "requirements.txt": ("python",),
    "Pipfile": ("python",),
    "Pipfile.lock": ("python",),
    "pyproject.toml": ("python",),
    "setup.py": ("python",),
    "manage.py": ("python", "django"),

    # IDEs
    ".idea": ("intellij",),
    ".vscode": ("vscode",),
    ".eclipse": ("eclipse",),
    ".settings": ("eclipse",),
    ".project": ("eclipse",),
    ".classpath": ("eclipse",),

    # Environment files
    ".env": ("dotenv",),
    ".env.local": ("dotenv",),
    ".env.development": ("dotenv",),
    ".env.production": ("dotenv",),

    # Go
    "go.mod": ("go",),
    "go.sum": ("go",),

    # Rust
    "Cargo.toml": ("rust",),
    "Cargo.lock": ("rust",),

    # PHP
    "composer.json": ("php", "composer"),
    "composer.lock": ("php", "composer"),

    # .NET
    "project.json": ("visualstudio",),
})

# gitwildmatch patterns matched against top-level names.
PATTERN_RULES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "java": ("*.java",),
    "node": ("tsconfig.json", "*.ts"),
    "visualstudio": ("*.csproj", "*.sln"),
})

# github/gitignore uses PascalCase file names, some under Global/.
GITHUB_TEMPLATE_MAP: Mapping[str, str] = MappingProxyType({
    "node": "Node",
    "java": "Java",
    "maven": "Maven",
    "gradle": "Gradle",
    "ruby": "Ruby",
    "python": "Python",
    "django": "Django",
    "go": "Go",
    "rust": "Rust",
    "php": "PHP",
    "composer": "Composer",
    "visualstudio": "VisualStudio",
    "intellij": "Global/JetBrains",
    "vscode": "Global/VisualStudioCode",
    "eclipse": "Global/Eclipse",
    "dotenv": "Global/Env",
    "c": "C",
    "cpp": "C++",
    "csharp": "VisualStudio",
    "typescript": "TypeScript",
    "javascript": "JavaScript",
    "react": "React",
    "vue": "Vue",
    "angular": "Angular",
    "nextjs": "Nextjs",
    "nuxt": "Nuxt",
    "gatsby": "Gatsby",
    "svelte": "Svelte",
    "yarn": "Yarn",
    "flutter": "Flutter",
    "dart": "Dart",
    "kotlin": "Kotlin",
    "swift": "Swift",
    "scala": "Scala",
    "clojure": "Clojure",
    "elixir": "Elixir",
    "erlang": "Erlang",
    "haskell": "Haskell",
    "ocaml": "OCaml",
    "perl": "Perl",
    "r": "R",
    "matlab": "MATLAB",
    "julia": "Julia",
    "lua": "Lua",
    "nim": "Nim",
    "crystal": "Crystal",
    "zig": "Zig",
    "terraform": "Terraform",
    "ansible": "Ansible",
    "kubernetes": "Kubernetes",
    "helm": "Helm",
    "vagrant": "Vagrant",
})

# Stacks the gitignore.io API knows. 'docker', 'npm' and 'pnpm' are not
# among them; docker is served by the local template instead.
VALID_STACKS = frozenset({
    "node", "yarn", "java", "maven", "gradle", "ruby",
    "python", "django", "go", "rust", "php", "composer", "visualstudio",
    "intellij", "vscode", "eclipse", "dotenv", "c", "cpp", "csharp",
    "typescript", "javascript", "react", "vue", "angular", "nextjs",
    "nuxt", "gatsby", "svelte", "flutter", "dart", "kotlin", "swift",
    "scala", "clojure", "elixir", "erlang", "haskell", "ocaml", "perl",
    "r", "matlab", "julia", "lua", "nim", "crystal", "zig", "v",
    "terraform", "ansible", "kubernetes", "helm", "vagrant", "packer",
})
