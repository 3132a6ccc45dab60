"""Basic usage: describe files from every origin and inspect their metadata."""

import tempfile
from pathlib import Path

from fileref import FileRefConfig, FileReference, configure

# ---- Local path ----
# Size and modification time are read once at construction.

with tempfile.TemporaryDirectory() as tmpdir:
    photo = Path(tmpdir) / "photo.jpg"
    photo.write_bytes(b"\xff\xd8\xff" + b"\x00" * 2045)

    local = FileReference.from_path(photo)
    print(f"[path] name={local.name}, size={local.readable_size}, hash={local.file_hash}")
    print(f"  mime_type={local.mime_type}, is_content_image={local.is_content_image}")
    # get_bytes() reads from disk on every call; keep the result if you need it twice.
    print(f"  get_bytes() length = {len(local.get_bytes())}")

# ---- Bytes ----
# file_hash is the SHA-256 digest of the content.

buffer = FileReference.from_bytes("notes.txt", b"remember the milk")
print(f"\n[bytes] name={buffer.name}, size={buffer.readable_size}, hash={buffer.file_hash[:16]}...")

# ---- URL ----
# Relative URLs are resolved against the configured base media URL.

remote = FileReference.from_url("media/2024/summer trip.mp4?token=abc", file_size=48_000_000)
print(f"\n[url] name={remote.name}, hash={remote.file_hash}, size={remote.readable_size}")
print(f"  full_network_url (no base) = {remote.full_network_url}")
configure(base_media_url="https://cdn.example.com/")
print(f"  full_network_url (process base) = {remote.full_network_url}")
injected = FileRefConfig(base_media_url="https://staging.example.com/")
print(f"  resolve_network_url(injected) = {remote.resolve_network_url(injected)}")
print(f"  cache_key = {remote.cache_key[:16]}... (query string ignored)")

# ---- Asset ----

asset = FileReference.from_asset("assets/images/app logo.png")
print(f"\n[asset] name={asset.name}, hash={asset.file_hash}, media_type={asset.media_type.value}")

# ---- Serialization ----
# to_dict() is the wire format; bytes are Base64-encoded.

payload = buffer.to_dict()
print(f"\n[serde] keys = {sorted(payload)}")
restored = FileReference.from_dict(payload)
print(f"  round-trip equal = {restored == buffer}")

legacy = FileReference.from_dict({"name": "old photo.png", "url": "uploads/old photo.png"})
print(f"  legacy record -> network_url={legacy.network_url}, derived hash={legacy.file_hash}")
