"""Feature slices of mp3check."""
