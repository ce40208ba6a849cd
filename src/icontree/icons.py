"""Icon glyph resolution for filesystem entries.

Glyphs come from a Nerd Font private-use range, so a patched terminal font is
needed to display them. Resolution tries the exact, case-sensitive entry
name, then the lowercased extension, and finally falls back to a
glyph chosen by file type, so every entry always gets an icon.
"""

from pathlib import PurePath
from types import MappingProxyType
from typing import Mapping

from icontree.types import FileType

# Fallback glyphs used when neither the name nor the extension is known
ICON_EXECUTABLE = "\uf489"
ICON_FILE = "\uf016"
ICON_DIRECTORY = "\uf115"
ICON_SYMLINK_DIR = "\uf482"
ICON_SYMLINK_FILE = "\uf481"

ICONS_BY_TYPE: Mapping[FileType, str] = MappingProxyType(
    {
        FileType.FILE: ICON_FILE,
        FileType.DIRECTORY: ICON_DIRECTORY,
        FileType.SYMLINK: ICON_SYMLINK_FILE,
        FileType.BLOCK_DEVICE: "\ufc29",
        FileType.CHAR_DEVICE: "\ue601",
        FileType.PIPE: "\uf731",
        FileType.SOCKET: "\uf6a7",
        FileType.SPECIAL: "\uf2dc",
    }
)

ICONS_BY_NAME: Mapping[str, str] = MappingProxyType(
    {
        "a.out": "\uf489",
        "api": "\uf98c",
        ".atom": "\ue764",
        "authorized_keys": "\ue60a",
        "backups": "\uf56e",
        ".bash_logout": "\ue615",
        ".bash_profile": "\ue615",
        ".bashrc": "\uf489",
        "bin": "\ue5fc",
        ".bpython_history": "\ue606",
        "bspwmrc": "\ue615",
        "cargo.lock": "\ue7a8",
        "cargo.toml": "\ue7a8",
        ".cargo": "\ue7a8",
        "changelog": "\ue609",
        ".clang-format": "\ue615",
        "composer.json": "\ue608",
        "conf.d": "\ue5fc",
        "config.ac": "\ue615",
        "config.el": "\ue779",
        "config.mk": "\ue615",
        ".config": "\ue5fc",
        "config": "\ue5fc",
        "contributing": "\ue60a",
        "copyright": "\ue60a",
        "cron.daily": "\ue5fc",
        "cron.d": "\ue5fc",
        "cron.hourly": "\ue5fc",
        "cron.monthly": "\ue5fc",
        "crontab": "\ue615",
        "cron.weekly": "\ue5fc",
        "crypttab": "\ue615",
        "css": "\ue749",
        "custom.el": "\ue779",
        ".dbus": "\uf013",
        "desktop": "\uf108",
        "docker-compose.yml": "\uf308",
        "dockerfile": "\uf308",
        "doc": "\uf02d",
        "documents": "\uf02d",
        ".doom.d": "\ue779",
        "downloads": "\uf498",
        ".ds_store": "\uf179",
        ".editorconfig": "\ue615",
        ".emacs.d": "\ue779",
        ".env": "\uf462",
        ".eslintrc.json": "\uf462",
        ".eslintrc.js": "\uf462",
        ".eslintrc.yml": "\uf462",
        "etc": "\ue5fc",
        "favicon.ico": "\uf005",
        "favicons": "\uf005",
        "fstab": "\uf1c0",
        ".gitattributes": "\uf1d3",
        ".gitconfig": "\uf1d3",
        ".git-credentials": "\ue60a",
        ".github": "\ue5fd",
        "gitignore_global": "\uf1d3",
        ".gitignore": "\uf1d3",
        ".gitlab-ci.yml": "\uf296",
        ".gitmodules": "\uf1d3",
        ".git": "\ue5fb",
        ".gnupg": "\uf023",
        "gradle": "\ue70e",
        "group": "\ue615",
        "gruntfile.coffee": "\ue611",
        "gruntfile.js": "\ue611",
        "gruntfile.ls": "\ue611",
        "gshadow": "\ue615",
        "gulpfile.coffee": "\ue610",
        "gulpfile.js": "\ue610",
        "gulpfile.ls": "\ue610",
        "hidden": "\uf023",
        "home": "\uf015",
        "hostname": "\ue615",
        "hosts": "\uf502",
        ".htaccess": "\ue615",
        "htoprc": "\ue615",
        ".htpasswd": "\ue615",
        ".idlerc": "\ue235",
        "img": "\uf1c5",
        "include": "\ue5fc",
        "init.el": "\ue779",
        ".inputrc": "\ue615",
        "inputrc": "\ue615",
        "js": "\ue74e",
        ".jupyter": "\ue606",
        "kbuild": "\ue615",
        "kconfig": "\ue615",
        "known_hosts": "\ue60a",
        ".kshrc": "\uf489",
        "lib64": "\uf121",
        "lib": "\uf121",
        "license.md": "\ue60a",
        "licenses": "\ue60a",
        "license.txt": "\ue60a",
        "license": "\ue60a",
        "localized": "\uf179",
        "lsb-release": "\ue615",
        ".lynxrc": "\ue615",
        ".mailcap": "\uf6ef",
        "mail": "\uf6ef",
        "maintainers": "\ue60a",
        "makefile.ac": "\ue615",
        "makefile": "\ue615",
        "manifest": "\uf292",
        "metadata": "\ue5fc",
        "metadata.xml": "\uf462",
        "mime.types": "\ufb44",
        "module.symvers": "\uf471",
        ".mozilla": "\ue786",
        "music": "\uf025",
        "muttrc": "\ue615",
        ".mutt": "\ue615",
        "netlify.toml": "\uf233",
        "node_modules": "\ue5fa",
        ".node_repl_history": "\ue718",
        "npmignore": "\ue71e",
        ".npm": "\ue5fa",
        "nvim": "\ue62b",
        "os-release": "\ue615",
        "package.json": "\ue718",
        "package-lock.json": "\ue718",
        "packages.el": "\ue779",
        "passwd": "\uf023",
        "pictures": "\uf03e",
        "pkgbuild": "\uf303",
        ".pki": "\uf023",
        "portage": "\ue5fc",
        "profile": "\ue615",
        ".profile": "\uf68c",
        "public": "\uf415",
        "__pycache__": "\uf81f",
        ".python_history": "\ue606",
        "rc.lua": "\ue615",
        "readme": "\ue609",
        ".release.toml": "\ue7a8",
        "requirements.txt": "\uf81f",
        "robots.txt": "\ufba7",
        "root": "\uf023",
        "rubydoc": "\ue73b",
        "runtime.txt": "\uf81f",
        ".rustup": "\ue7a8",
        ".rvm": "\ue21e",
        "sass": "\ue603",
        "sbin": "\ue5fc",
        "scripts": "\uf489",
        "scss": "\ue603",
        "shadow": "\ue615",
        "share": "\uf064",
        ".shellcheckrc": "\ue615",
        "shells": "\ue615",
        ".sqlite_history": "\ue7c4",
        "src": "\uf121",
        ".ssh": "\uf023",
        "styles": "\ue749",
        "sudoers": "\uf023",
        "sxhkdrc": "\ue615",
        "tigrc": "\ue615",
        "tox.ini": "\uf81f",
        ".trash": "\uf1f8",
        "ts": "\ue628",
        "unlicense": "\ue60a",
        "url": "\uf0ac",
        "user-dirs.dirs": "\ue5fc",
        "vagrantfile": "\ue615",
        "venv": "\uf81f",
        "videos": "\uf03d",
        ".viminfo": "\ue62b",
        ".vimrc": "\ue62b",
        "vimrc": "\ue62b",
        ".vim": "\ue62b",
        "vim": "\ue62b",
        ".vscode": "\ue70c",
        "webpack.config.js": "\ufc29",
        ".wgetrc": "\ue615",
        "wgetrc": "\ue615",
        ".xauthority": "\ue615",
        ".Xauthority": "\ue615",
        "xbps.d": "\ue5fc",
        ".xinitrc": "\ue615",
        ".xmodmap": "\ue615",
        ".Xmodmap": "\ue615",
        "xmonad.hs": "\ue615",
        "xorg.conf.d": "\ue5fc",
        ".xprofile": "\ue615",
        ".Xprofile": "\ue615",
        ".xresources": "\ue615",
        "zathurarc": "\ue615",
        ".zsh_history": "\ue615",
        ".zshrc": "\uf489",
    }
)

ICONS_BY_EXTENSION: Mapping[str, str] = MappingProxyType(
    {
        "1": "\uf02d",
        "2": "\uf02d",
        "3": "\uf02d",
        "4": "\uf02d",
        "5": "\uf02d",
        "6": "\uf02d",
        "7": "\uf02d",
        "7z": "\uf410",
        "8": "\uf02d",
        "ai": "\ue7b4",
        "ape": "\uf001",
        "apk": "\ue70e",
        "asc": "\uf023",
        "asm": "\uf471",
        "asp": "\uf121",
        "a": "\ue624",
        "avi": "\uf008",
        "avro": "\ue60b",
        "awk": "\uf489",
        "bak": "\uf56e",
        "bash_history": "\uf489",
        "bash_profile": "\uf489",
        "bashrc": "\uf489",
        "bash": "\uf489",
        "bat": "\uf17a",
        "bin": "\uf489",
        "bio": "\uf910",
        "bmp": "\uf1c5",
        "bz2": "\uf410",
        "cc": "\ue61d",
        "cfg": "\ue615",
        "class": "\ue738",
        "cljs": "\ue76a",
        "clj": "\ue768",
        "cls": "\ue600",
        "cl": "\uf671",
        "coffee": "\uf0f4",
        "conf": "\ue615",
        "cpp": "\ue61d",
        "cp": "\ue61d",
        "cshtml": "\uf1fa",
        "csh": "\uf489",
        "csproj": "\uf81a",
        "css": "\ue749",
        "cs": "\uf81a",
        "csv": "\uf1c3",
        "csx": "\uf81a",
        "c++": "\ue61d",
        "c": "\ue61e",
        "cue": "\uf001",
        "cxx": "\ue61d",
        "dart": "\ue798",
        "dat": "\uf1c0",
        "db": "\uf1c0",
        "deb": "\uf187",
        "desktop": "\uf108",
        "diff": "\ue728",
        "dll": "\uf17a",
        "dockerfile": "\uf308",
        "doc": "\uf1c2",
        "docx": "\uf1c2",
        "ds_store": "\uf179",
        "dump": "\uf1c0",
        "ebook": "\ue28b",
        "ebuild": "\uf30d",
        "eclass": "\uf30d",
        "editorconfig": "\ue615",
        "ejs": "\ue618",
        "elc": "\uf671",
        "elf": "\uf489",
        "elm": "\ue62c",
        "el": "\uf671",
        "env": "\uf462",
        "eot": "\uf031",
        "epub": "\ue28a",
        "erb": "\ue73b",
        "erl": "\ue7b1",
        "exe": "\uf17a",
        "exs": "\ue62d",
        "ex": "\ue62d",
        "fish": "\uf489",
        "flac": "\uf001",
        "flv": "\uf008",
        "font": "\uf031",
        "fpl": "\uf910",
        "fsi": "\ue7a7",
        "fs": "\ue7a7",
        "fsx": "\ue7a7",
        "gdoc": "\uf1c2",
        "gemfile": "\ue21e",
        "gemspec": "\ue21e",
        "gform": "\uf298",
        "gif": "\uf1c5",
        "git": "\uf1d3",
        "go": "\ue627",
        "gradle": "\ue70e",
        "gsheet": "\uf1c3",
        "gslides": "\uf1c4",
        "guardfile": "\ue21e",
        "gz": "\uf410",
        "hbs": "\ue60f",
        "heic": "\uf1c5",
        "heif": "\uf1c5",
        "heix": "\uf1c5",
        "hh": "\uf0fd",
        "hpp": "\uf0fd",
        "hs": "\ue777",
        "html": "\uf13b",
        "htm": "\uf13b",
        "h": "\uf0fd",
        "hxx": "\uf0fd",
        "ico": "\uf1c5",
        "image": "\uf1c5",
        "img": "\uf1c0",
        "iml": "\ue7b5",
        "info": "\ue795",
        "ini": "\ue615",
        "ipynb": "\ue606",
        "iso": "\uf1c0",
        "j2": "\ue000",
        "jar": "\ue738",
        "java": "\ue738",
        "jinja": "\ue000",
        "jl": "\ue624",
        "jpeg": "\uf1c5",
        "jpg": "\uf1c5",
        "jsonc": "\ue60b",
        "json": "\ue60b",
        "js": "\ue74e",
        "jsx": "\ue7ba",
        "key": "\ue60a",
        "ksh": "\uf489",
        "kt": "\ue634",
        "kts": "\ue634",
        "ldb": "\uf1c0",
        "ld": "\ue624",
        "less": "\ue758",
        "lhs": "\ue777",
        "license": "\ue60a",
        "lisp": "\uf671",
        "list": "\uf03a",
        "localized": "\uf179",
        "lock": "\uf023",
        "log": "\uf18d",
        "lss": "\ue749",
        "lua": "\ue620",
        "lz": "\uf410",
        "m3u8": "\uf910",
        "m3u": "\uf910",
        "m4a": "\uf001",
        "m4v": "\uf008",
        "magnet": "\uf076",
        "man": "\uf02d",
        "markdown": "\ue609",
        "md": "\ue609",
        "mjs": "\ue74e",
        "mkd": "\ue609",
        "mk": "\uf085",
        "mkv": "\uf008",
        "mobi": "\ue28b",
        "mov": "\uf008",
        "mp3": "\uf001",
        "mp4": "\uf008",
        "msi": "\uf17a",
        "mustache": "\ue60f",
        "nix": "\uf313",
        "npmignore": "\ue71e",
        "ogg": "\uf001",
        "ogv": "\uf008",
        "old": "\uf56e",
        "opus": "\uf001",
        "orig": "\uf56e",
        "otf": "\uf031",
        "o": "\ue624",
        "pdf": "\uf1c1",
        "pem": "\uf805",
        "phar": "\ue608",
        "php": "\ue608",
        "pkg": "\uf187",
        "plist": "\uf302",
        "pls": "\uf910",
        "pl": "\ue769",
        "pm": "\ue769",
        "png": "\uf1c5",
        "ppt": "\uf1c4",
        "pptx": "\uf1c4",
        "procfile": "\ue21e",
        "properties": "\ue60b",
        "ps1": "\uf489",
        "psd": "\ue7b8",
        "pub": "\ue60a",
        "pxm": "\uf1c5",
        "pyc": "\ue606",
        "py": "\ue606",
        "rakefile": "\ue21e",
        "rar": "\uf410",
        "razor": "\uf1fa",
        "rb": "\ue21e",
        "rdata": "\ufcd2",
        "rdb": "\ue76d",
        "rdoc": "\ue609",
        "rds": "\ufcd2",
        "readme": "\ue609",
        "rlib": "\ue7a8",
        "rl": "\uf11c",
        "rmd": "\ue609",
        "rpm": "\uf187",
        "rproj": "\ufac5",
        "rspec_parallel": "\ue21e",
        "rspec_status": "\ue21e",
        "rspec": "\ue21e",
        "rss": "\uf09e",
        "rs": "\ue7a8",
        "rtf": "\uf15c",
        "rubydoc": "\ue73b",
        "r": "\ufcd2",
        "ru": "\ue21e",
        "sass": "\ue603",
        "scala": "\ue737",
        "scpt": "\uf302",
        "scss": "\ue603",
        "shell": "\uf489",
        "sh": "\uf489",
        "sig": "\ue60a",
        "slim": "\ue73b",
        "sln": "\ue70c",
        "so": "\ue624",
        "sqlite3": "\ue7c4",
        "sql": "\uf1c0",
        "srt": "\uf02d",
        "styl": "\ue600",
        "stylus": "\ue600",
        "sublime-package": "\ue7aa",
        "sublime-session": "\ue7aa",
        "sub": "\uf02d",
        "s": "\uf471",
        "svg": "\uf1c5",
        "swift": "\ue755",
        "swp": "\ue62b",
        "sym": "\ue624",
        "tar": "\uf410",
        "tex": "\ue600",
        "tgz": "\uf410",
        "tiff": "\uf1c5",
        "toml": "\ue60b",
        "torrent": "\uf98c",
        "trash": "\uf1f8",
        "ts": "\ue628",
        "tsx": "\ue7ba",
        "ttc": "\uf031",
        "ttf": "\uf031",
        "t": "\ue769",
        "twig": "\ue61c",
        "txt": "\uf15c",
        "video": "\uf008",
        "vim": "\ue62b",
        "vlc": "\uf910",
        "vue": "\ufd42",
        "wav": "\uf001",
        "webm": "\uf008",
        "webp": "\uf1c5",
        "windows": "\uf17a",
        "wma": "\uf001",
        "wmv": "\uf008",
        "woff2": "\uf031",
        "woff": "\uf031",
        "wpl": "\uf910",
        "xbps": "\uf187",
        "xcf": "\uf1c5",
        "xls": "\uf1c3",
        "xlsx": "\uf1c3",
        "xml": "\uf121",
        "xul": "\uf269",
        "xz": "\uf410",
        "yaml": "\ue60b",
        "yml": "\ue60b",
        "zip": "\uf410",
        "zshrc": "\uf489",
        "zsh-theme": "\uf489",
        "zsh": "\uf489",
        "zst": "\uf410",
    }
)


def extension_of(name: str) -> str:
    """Return the lowercased extension of ``name`` without the dot.

    Leading dots do not start an extension, so ``.bashrc`` has none while
    ``archive.tar.gz`` has ``gz``.
    """
    return PurePath(name).suffix[1:].lower()


def type_icon(file_type: FileType, executable: bool = False, points_to_dir: bool = False) -> str:
    """Return the fallback glyph for a file type.

    Args:
        file_type: The classified type of the entry.
        executable: Whether a regular file has any execute bit set.
        points_to_dir: Whether a symlink resolves to a directory.

    Returns:
        The glyph for the type; never empty.
    """
    if file_type is FileType.FILE and executable:
        return ICON_EXECUTABLE
    if file_type is FileType.SYMLINK and points_to_dir:
        return ICON_SYMLINK_DIR
    return ICONS_BY_TYPE[file_type]


def resolve_icon(name: str, file_type: FileType, executable: bool = False, points_to_dir: bool = False) -> str:
    """Resolve the glyph for an entry.

    Args:
        name: Base name of the entry.
        file_type: The classified type of the entry.
        executable: Whether a regular file has any execute bit set.
        points_to_dir: Whether a symlink resolves to a directory.

    Returns:
        The glyph from the name table, the extension table or the type
        fallback, in that order of preference.

    Example:
        >>> resolve_icon("node_modules", FileType.DIRECTORY) == ICONS_BY_NAME["node_modules"]
        True
        >>> resolve_icon("main.PY", FileType.FILE) == ICONS_BY_EXTENSION["py"]
        True
        >>> resolve_icon("Cargo.toml", FileType.FILE) == ICONS_BY_EXTENSION["toml"]
        True
        >>> resolve_icon("unknown", FileType.FILE, executable=True) == ICON_EXECUTABLE
        True
    """
    icon = ICONS_BY_NAME.get(name)
    if icon:
        return icon
    icon = ICONS_BY_EXTENSION.get(extension_of(name))
    if icon:
        return icon
    return type_icon(file_type, executable=executable, points_to_dir=points_to_dir)
