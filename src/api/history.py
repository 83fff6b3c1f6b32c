#!/usr/bin/env python3
"""
History API Backend
Manages tool history and favorite tools in memory with configurable limits
"""

import uuid
from datetime import datetime
from typing import Dict, List, Optional, Any

from config.settings import load_config, DEFAULT_HISTORY_LIMIT, DEFAULT_GLOBAL_HISTORY_LIMIT

# Tools whose history keeps one entry per distinct value
DEDUPLICATED_TOOLS = {"color-converter"}


class HistoryManager:
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.history_data: Dict[str, List[Dict]] = {}
        self.global_history: List[Dict] = []  # Global history across all tools
        self.config = config if config is not None else load_config()

    def _get_history_limit(self, tool_name: str) -> int:
        """Get history limit for a specific tool"""
        return self.config.get("history_limits", {}).get(tool_name, DEFAULT_HISTORY_LIMIT)

    @staticmethod
    def _dedupe_key(data: str) -> str:
        return data.strip().lower()

    def add_history_entry(self, tool_name: str, data: str, operation: str = "process",
                          metadata: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Add a new history entry for a tool"""
        history = self.history_data.setdefault(tool_name, [])

        if tool_name in DEDUPLICATED_TOOLS:
            key = self._dedupe_key(data)
            history[:] = [e for e in history if self._dedupe_key(e["data"]) != key]

        entry = {
            "id": str(uuid.uuid4())[:8],
            "timestamp": datetime.now().isoformat(),
            "data": data,
            "operation": operation,
            "metadata": metadata or {},
            "preview": self._generate_preview(data)
        }

        # Most recent first
        history.insert(0, entry)
        del history[self._get_history_limit(tool_name):]

        self.global_history.insert(0, {**entry, "tool_name": tool_name})
        global_limit = self.config.get("global_history_limit", DEFAULT_GLOBAL_HISTORY_LIMIT)
        del self.global_history[global_limit:]

        return {
            "success": True,
            "entry_id": entry["id"],
            "message": "History entry added"
        }

    def get_history(self, tool_name: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Get history entries for a tool"""
        history = self.history_data.get(tool_name, [])
        if limit:
            history = history[:limit]

        return [
            {
                "id": entry["id"],
                "timestamp": entry["timestamp"],
                "preview": entry["preview"],
                "operation": entry["operation"],
                "metadata": entry["metadata"],
                "formatted_date": self._format_date(entry["timestamp"])
            }
            for entry in history
        ]

    def get_history_entry(self, tool_name: str, entry_id: str) -> Optional[Dict[str, Any]]:
        """Get specific history entry data"""
        for entry in self.history_data.get(tool_name, []):
            if entry["id"] == entry_id:
                return {
                    "id": entry["id"],
                    "timestamp": entry["timestamp"],
                    "data": entry["data"],
                    "operation": entry["operation"],
                    "metadata": entry["metadata"],
                    "preview": entry["preview"]
                }
        return None

    def delete_history_entry(self, tool_name: str, entry_id: str) -> bool:
        """Delete specific history entry for a tool"""
        history = self.history_data.get(tool_name)
        if not history:
            return False

        original_count = len(history)
        history[:] = [e for e in history if e["id"] != entry_id]
        self.global_history = [e for e in self.global_history
                               if not (e["id"] == entry_id and e["tool_name"] == tool_name)]
        return len(history) < original_count

    def clear_history(self, tool_name: str) -> Dict[str, Any]:
        """Clear all history for a tool"""
        self.history_data.pop(tool_name, None)
        self.global_history = [e for e in self.global_history if e["tool_name"] != tool_name]

        return {
            "success": True,
            "message": f"History cleared for {tool_name}"
        }

    def get_global_history(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Get global history entries across all tools"""
        history = self.global_history[:limit] if limit else self.global_history
        return [
            {
                "id": entry["id"],
                "timestamp": entry["timestamp"],
                "preview": entry["preview"],
                "operation": entry["operation"],
                "tool_name": entry["tool_name"],
                "formatted_date": self._format_date(entry["timestamp"])
            }
            for entry in history
        ]

    def get_all_history_stats(self) -> Dict[str, Any]:
        """Get statistics about all tool histories"""
        stats = {}
        total_entries = 0

        for tool_name, history in self.history_data.items():
            stats[tool_name] = {
                "count": len(history),
                "limit": self._get_history_limit(tool_name),
                "last_updated": history[0]["timestamp"] if history else None
            }
            total_entries += len(history)

        return {
            "tools": stats,
            "total_entries": total_entries,
            "tools_count": len(self.history_data)
        }

    def _generate_preview(self, data: str, max_length: int = 100) -> str:
        """Generate a preview of the data"""
        preview = ' '.join(data.split())
        if len(preview) <= max_length:
            return preview
        return preview[:max_length] + "..."

    def _format_date(self, iso_timestamp: str) -> str:
        """Format ISO timestamp to readable format"""
        try:
            dt = datetime.fromisoformat(iso_timestamp.replace('Z', '+00:00'))
        except ValueError:
            return "Unknown"

        diff = datetime.now() - dt.replace(tzinfo=None)
        if diff.days > 0:
            return f"{diff.days} day{'s' if diff.days > 1 else ''} ago"
        elif diff.seconds > 3600:
            hours = diff.seconds // 3600
            return f"{hours} hour{'s' if hours > 1 else ''} ago"
        elif diff.seconds > 60:
            minutes = diff.seconds // 60
            return f"{minutes} minute{'s' if minutes > 1 else ''} ago"
        return "Just now"


class FavoritesManager:
    """Tracks which tools the user has marked as favorites."""

    def __init__(self):
        self.favorites: List[str] = []

    def toggle(self, tool_id: str) -> bool:
        """Flip the favorite flag for a tool and return the new state"""
        if tool_id in self.favorites:
            self.favorites.remove(tool_id)
            return False
        self.favorites.append(tool_id)
        return True

    def is_favorite(self, tool_id: str) -> bool:
        return tool_id in self.favorites

    def get_favorites(self) -> List[str]:
        return list(self.favorites)

    def clear(self) -> None:
        self.favorites.clear()


# Global instances
history_manager = HistoryManager()
favorites_manager = FavoritesManager()


def validate_tool_name(tool_name: str) -> bool:
    """Validate tool name format"""
    if not tool_name:
        return False

    # Allow alphanumeric, hyphens, and underscores
    allowed_chars = set('abcdefghijklmnopqrstuvwxyz0123456789-_')
    return all(c.lower() in allowed_chars for c in tool_name)


def sanitize_data(data: Any, max_size: int = 1024 * 1024) -> str:
    """Sanitize and validate input data"""
    if not isinstance(data, str):
        data = str(data)

    # Limit data size (1MB default)
    if len(data) > max_size:
        raise ValueError(f"Data too large. Maximum size: {max_size} characters")

    return data
