"""
File type detection API.
Sniffs file types from leading magic bytes and maps extensions to MIME types.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional

from api.encoding import decode_base64_bytes, hex_to_bytes

# Hex prefix -> extension. Longest prefix wins.
SIGNATURES: Dict[str, str] = {
    # Images
    'FFD8FF': 'jpg',
    '89504E47': 'png',
    '47494638': 'gif',
    '424D': 'bmp',
    '49492A00': 'tif',
    '4D4D002A': 'tif',
    '52494646': 'webp',

    # Documents
    '25504446': 'pdf',
    'D0CF11E0A1B11AE1': 'doc',
    '504B0304': 'docx',
    '7B5C727466': 'rtf',
    '3C3F786D6C': 'xml',
    '68746D6C3E': 'html',
    'EFBBBF': 'txt',
    'FFFE': 'txt',
    'FEFF': 'txt',

    # Archives
    '52617221': 'rar',
    '1F8B08': 'gz',
    '425A68': 'bz2',
    '377ABCAF271C': '7z',

    # Audio
    '494433': 'mp3',
    'FFF1': 'aac',
    'FFF8': 'aac',
    '4F676753': 'ogg',
    '664C6143': 'flac',
    '2E736E64': 'au',
    '4D546864': 'mid',

    # Video
    '000001BA': 'mpg',
    '000001B3': 'mpg',
    '1A45DFA3': 'mkv',
    '00000018': 'mp4',
    '00000020': 'mp4',
    '66747970': 'mp4',
    '3026B2758E66CF11': 'wmv',

    # Fonts
    '00010000': 'ttf',
    '4F54544F': 'otf',
    '774F4646': 'woff',
    '774F4632': 'woff2',

    # Other
    'CAFEBABE': 'class',
    '7F454C46': 'elf',
    '3C21344E414D453E': 'xml',
}

SORTED_SIGNATURES = sorted(SIGNATURES, key=len, reverse=True)

# Number of leading bytes examined (50 Base64 characters)
SNIFF_LENGTH = 37

# Containers shared by several formats
AMBIGUOUS_TYPES: Dict[str, List[str]] = {
    'webp': ['webp', 'wav', 'avi'],
    'docx': ['docx', 'xlsx', 'pptx', 'zip', 'jar', 'apk'],
    'doc': ['doc', 'xls', 'ppt'],
}

DESCRIPTIONS: Dict[str, str] = {
    'jpg': 'JPEG Image', 'png': 'PNG Image', 'gif': 'GIF Image',
    'bmp': 'Bitmap Image', 'tif': 'TIFF Image', 'webp': 'WebP Image',
    'pdf': 'PDF Document', 'doc': 'Word Document (legacy)',
    'xls': 'Excel Spreadsheet (legacy)', 'ppt': 'PowerPoint Presentation (legacy)',
    'docx': 'Word Document', 'xlsx': 'Excel Spreadsheet',
    'pptx': 'PowerPoint Presentation', 'zip': 'ZIP Archive',
    'jar': 'Java Archive', 'apk': 'Android Package',
    'rtf': 'Rich Text Document', 'xml': 'XML Document', 'html': 'HTML Document',
    'txt': 'Text File', 'rar': 'RAR Archive', 'gz': 'Gzip Archive',
    'bz2': 'Bzip2 Archive', '7z': '7-Zip Archive', 'mp3': 'MP3 Audio',
    'aac': 'AAC Audio', 'ogg': 'Ogg Audio', 'flac': 'FLAC Audio',
    'wav': 'WAV Audio', 'au': 'Sun Audio', 'mid': 'MIDI Audio',
    'mpg': 'MPEG Video', 'mkv': 'Matroska Video', 'mp4': 'MP4 Video',
    'avi': 'AVI Video', 'wmv': 'Windows Media Video', 'ttf': 'TrueType Font',
    'otf': 'OpenType Font', 'woff': 'Web Open Font', 'woff2': 'Web Open Font 2',
    'class': 'Java Class File', 'elf': 'ELF Executable', 'bin': 'Binary File',
}

DEFAULT_MIME_TYPE = 'application/octet-stream'

MIME_TYPES: Dict[str, str] = {
    # Images
    'jpg': 'image/jpeg',
    'jpeg': 'image/jpeg',
    'png': 'image/png',
    'gif': 'image/gif',
    'bmp': 'image/bmp',
    'webp': 'image/webp',
    'svg': 'image/svg+xml',
    'tif': 'image/tiff',
    'tiff': 'image/tiff',
    'ico': 'image/x-icon',

    # Audio
    'mp3': 'audio/mpeg',
    'wav': 'audio/wav',
    'ogg': 'audio/ogg',
    'flac': 'audio/flac',
    'aac': 'audio/aac',
    'm4a': 'audio/mp4',

    # Video
    'mp4': 'video/mp4',
    'webm': 'video/webm',
    'avi': 'video/x-msvideo',
    'mpeg': 'video/mpeg',
    'mpg': 'video/mpeg',
    'mov': 'video/quicktime',
    'mkv': 'video/x-matroska',
    'wmv': 'video/x-ms-wmv',

    # Documents
    'pdf': 'application/pdf',
    'doc': 'application/msword',
    'docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    'xls': 'application/vnd.ms-excel',
    'xlsx': 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    'ppt': 'application/vnd.ms-powerpoint',
    'pptx': 'application/vnd.openxmlformats-officedocument.presentationml.presentation',
    'csv': 'text/csv',
    'rtf': 'application/rtf',

    # Text
    'txt': 'text/plain',
    'html': 'text/html',
    'htm': 'text/html',
    'xml': 'application/xml',
    'css': 'text/css',
    'js': 'application/javascript',
    'json': 'application/json',
    'md': 'text/markdown',

    # Archives
    'zip': 'application/zip',
    'rar': 'application/vnd.rar',
    'tar': 'application/x-tar',
    'gz': 'application/gzip',
    '7z': 'application/x-7z-compressed',

    # Fonts
    'ttf': 'font/ttf',
    'otf': 'font/otf',
    'woff': 'font/woff',
    'woff2': 'font/woff2',

    # Other
    'bin': 'application/octet-stream',
    'exe': 'application/octet-stream',
    'apk': 'application/vnd.android.package-archive',
    'iso': 'application/x-iso9660-image',
    'swf': 'application/x-shockwave-flash',
}

# Additional registered names for the same content
MIME_ALIASES: Dict[str, List[str]] = {
    'xml': ['text/xml'],
    'wav': ['audio/x-wav', 'audio/wave'],
    'mp3': ['audio/mp3'],
    'rar': ['application/x-rar-compressed'],
    'gz': ['application/x-gzip'],
    'zip': ['application/x-zip-compressed'],
    'js': ['text/javascript'],
    'rtf': ['text/rtf'],
    'bz2': ['application/x-bzip2'],
    'au': ['audio/basic'],
    'mid': ['audio/midi', 'audio/x-midi'],
    'class': ['application/java-vm'],
    'elf': ['application/x-executable'],
    'jar': ['application/java-archive'],
}


@dataclass
class FileTypeCandidate:
    """A possible file type for a byte sequence."""

    extension: str
    description: str
    priority: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class DecodedFile:
    """Decoded file payload with its resolved name and type."""

    content: bytes
    extension: Optional[str]
    mime_type: str
    file_name: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses (content excluded)."""
        return {
            'extension': self.extension,
            'mime_type': self.mime_type,
            'file_name': self.file_name,
            'size': len(self.content),
        }


def detect_extension(data: bytes) -> Optional[str]:
    """Return the extension whose signature matches the leading bytes, or None."""
    head = data[:SNIFF_LENGTH].hex().upper()
    for signature in SORTED_SIGNATURES:
        if head.startswith(signature):
            return SIGNATURES[signature]
    return None


def detect_file_types(data: bytes) -> Dict[str, Any]:
    """List every candidate file type for the leading bytes plus the default choice."""
    extension = detect_extension(data)
    if extension is None:
        fallback = FileTypeCandidate('bin', DESCRIPTIONS['bin'], 100)
        return {'detected_types': [fallback], 'default_type': fallback}

    candidates = [
        FileTypeCandidate(ext, DESCRIPTIONS.get(ext, ext.upper()), priority)
        for priority, ext in enumerate(AMBIGUOUS_TYPES.get(extension, [extension]), start=1)
    ]
    return {'detected_types': candidates, 'default_type': candidates[0]}


def _strip_dot(extension: str) -> str:
    return extension[1:] if extension.startswith('.') else extension


def mime_type_for(extension: Optional[str]) -> str:
    """Map an extension (with or without a dot, any case) to a MIME type."""
    if not extension:
        return DEFAULT_MIME_TYPE
    return MIME_TYPES.get(_strip_dot(extension).lower(), DEFAULT_MIME_TYPE)


def mime_types_for(extension: Optional[str]) -> List[str]:
    """All known MIME types for an extension, primary first."""
    if not extension:
        return [DEFAULT_MIME_TYPE]
    ext = _strip_dot(extension).lower()
    types = []
    if ext in MIME_TYPES:
        types.append(MIME_TYPES[ext])
    types.extend(MIME_ALIASES.get(ext, []))
    return types or [DEFAULT_MIME_TYPE]


def build_file_name(name: Optional[str], extension: Optional[str],
                    now: Optional[datetime] = None) -> str:
    """Resolve the download file name for a decoded payload."""
    ext = extension or 'bin'
    name = (name or '').strip()
    if not name:
        now = now or datetime.now()
        return f"file-{now.strftime('%Y%m%d%H%M')}.{ext}"
    if '.' not in name:
        return f"{name}.{ext}"
    return name


def _resolve(content: bytes, file_name: Optional[str]) -> DecodedFile:
    extension = detect_extension(content)
    name = build_file_name(file_name, extension)
    if extension:
        mime_type = mime_type_for(extension)
    else:
        mime_type = mime_type_for(name.rsplit('.', 1)[-1])
    return DecodedFile(content=content, extension=extension, mime_type=mime_type, file_name=name)


def decode_base64_file(data: str, file_name: Optional[str] = None) -> DecodedFile:
    """Decode a Base64 payload (data URL prefix allowed) into a file."""
    return _resolve(decode_base64_bytes(data), file_name)


def decode_hex_file(data: str, file_name: Optional[str] = None) -> DecodedFile:
    """Decode a hex payload into a file. Odd-length input is rejected."""
    return _resolve(hex_to_bytes(data, strict=True), file_name)
