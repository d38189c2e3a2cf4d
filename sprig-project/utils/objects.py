# What it does: Manages the low-level object database, handling the storage and retrieval of blobs and commits
# How it does: It implements a content-addressed storage system. Every object is written once under objects/blobs/<2 hex>/<38 hex> or objects/commits/<2 hex>/<38 hex> as zlib("<type> <len>\0" + payload). Blobs are keyed by the SHA-1 of their raw bytes, commits by the SHA-1 of their message, timestamp, parent and sorted file digests
# What data structure it uses: Hash Table / Dictionary (the object store is a content-addressed dictionary where the SHA-1 hash is the key), and a flat filename -> digest map for every commit snapshot

import os
import hashlib
import tempfile
import zlib
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from loguru import logger

from utils import errors

DIGEST_LENGTH = 40
COMMIT_FORMAT = '1'
INITIAL_MESSAGE = 'initial commit'
INITIAL_TIMESTAMP = '1970-01-01T00:00:00+00:00'


def hash_content(content): # Returns the digest of raw bytes without writing anything
    return hashlib.sha1(content).hexdigest()


def commit_digest(message, timestamp, parent, file_digests): # Digest of a commit: a pure function of its message, timestamp, parent and sorted blob digests
    sha1 = hashlib.sha1()
    for part in [message, timestamp, parent or ''] + sorted(file_digests):
        sha1.update(part.encode('utf-8'))
        sha1.update(b'\0')
    return sha1.hexdigest()


@dataclass
class Commit:
    """
    An immutable snapshot of the tracked files plus its history links.

    Attributes:
        message: Commit message
        timestamp: ISO-8601 UTC time the commit was made
        parent: Digest of the first parent, None only for the root commit
        second_parent: Digest of the merged-in branch tip, merge commits only
        tree: Complete filename -> blob digest snapshot
    """

    message: str
    timestamp: str
    parent: Optional[str] = None
    second_parent: Optional[str] = None
    tree: Dict[str, str] = field(default_factory=dict)

    @property
    def digest(self) -> str:
        return commit_digest(self.message, self.timestamp, self.parent, self.tree.values())

    @property
    def is_merge(self) -> bool:
        return self.second_parent is not None

    def serialize(self) -> bytes:
        """Encode the commit in its canonical, versioned text form."""
        lines = [f'format {COMMIT_FORMAT}', f'timestamp {self.timestamp}']
        if self.parent:
            lines.append(f'parent {self.parent}')
        if self.second_parent:
            lines.append(f'merge-parent {self.second_parent}')
        for name in sorted(self.tree):
            lines.append(f'file {self.tree[name]} {name}')
        lines.append('')
        lines.append(self.message)
        return '\n'.join(lines).encode('utf-8')

    @classmethod
    def deserialize(cls, payload: bytes) -> 'Commit':
        """Decode a payload produced by serialize()."""
        text = payload.decode('utf-8')
        header, sep, message = text.partition('\n\n')
        if not sep:
            raise errors.CorruptObject()
        fields = {'parent': None, 'second_parent': None}
        tree = {}
        version = None
        timestamp = None
        for line in header.split('\n'):
            key, _, value = line.partition(' ')
            if key == 'format':
                version = value
            elif key == 'timestamp':
                timestamp = value
            elif key == 'parent':
                fields['parent'] = value
            elif key == 'merge-parent':
                fields['second_parent'] = value
            elif key == 'file':
                digest, _, name = value.partition(' ')
                tree[name] = digest
        if version != COMMIT_FORMAT or timestamp is None:
            raise errors.CorruptObject(f"Unsupported commit format: {version}")
        return cls(message=message, timestamp=timestamp, tree=tree, **fields)


def make_initial_commit(): # The root commit is fixed so that every new repository starts from the same digest
    return Commit(message=INITIAL_MESSAGE, timestamp=INITIAL_TIMESTAMP)


class ObjectStore:
    """
    Append-only content-addressed storage under .sprig/objects.

    Blobs and commits live in separate namespaces (objects/blobs and
    objects/commits), so a blob whose bytes hash to a commit digest never
    collides with that commit.
    """

    def __init__(self, objects_dir):
        self.objects_dir = objects_dir
        self.blobs_dir = os.path.join(objects_dir, 'blobs')
        self.commits_dir = os.path.join(objects_dir, 'commits')

    def _namespace(self, obj_type):
        return self.commits_dir if obj_type == 'commit' else self.blobs_dir

    def _path(self, obj_type, digest):
        return os.path.join(self._namespace(obj_type), digest[:2], digest[2:])

    def _has(self, obj_type, digest):
        return len(digest) == DIGEST_LENGTH and os.path.isfile(self._path(obj_type, digest))

    def is_commit(self, digest):
        return self._has('commit', digest)

    def _write(self, digest, obj_type, payload):
        path = self._path(obj_type, digest)
        if os.path.exists(path):
            return
        header = f'{obj_type} {len(payload)}\0'.encode()
        object_dir = os.path.dirname(path)
        os.makedirs(object_dir, exist_ok=True)
        # Written to a temporary name first so a crash never leaves a truncated object
        fd, tmp_path = tempfile.mkstemp(dir=object_dir)
        with os.fdopen(fd, 'wb') as f:
            f.write(zlib.compress(header + payload))
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
        logger.debug(f"Stored {obj_type} {digest[:7]} ({len(payload)} bytes)")

    def _read(self, obj_type, digest):
        if not self._has(obj_type, digest):
            raise errors.NotFound(f"No {obj_type} object {digest}")
        with open(self._path(obj_type, digest), 'rb') as f:
            data = zlib.decompress(f.read())
        null_byte_index = data.find(b'\0')
        if null_byte_index < 0:
            raise errors.CorruptObject(f"Object {digest} has no header")
        stored_type, _ = data[:null_byte_index].decode().split(' ')
        if stored_type != obj_type:
            raise errors.CorruptObject(f"Object {digest} is a {stored_type}, expected {obj_type}")
        return data[null_byte_index + 1:]

    def put(self, content):
        digest = hash_content(content)
        self._write(digest, 'blob', content)
        return digest

    def get(self, digest):
        return self._read('blob', digest)

    def put_commit(self, commit):
        digest = commit.digest
        self._write(digest, 'commit', commit.serialize())
        return digest

    def get_commit(self, digest):
        return Commit.deserialize(self._read('commit', digest))

    def _iter_commit_digests(self, prefix=''):
        if not os.path.isdir(self.commits_dir):
            return
        for fan_out in sorted(os.listdir(self.commits_dir)):
            if len(fan_out) != 2 or not fan_out.startswith(prefix[:2]):
                continue
            for rest in sorted(os.listdir(os.path.join(self.commits_dir, fan_out))):
                digest = fan_out + rest
                if len(digest) == DIGEST_LENGTH and digest.startswith(prefix):
                    yield digest

    def iter_commits(self) -> Iterator[Commit]:
        for digest in self._iter_commit_digests():
            yield self.get_commit(digest)

    def resolve_commit(self, ref): # Accepts a full digest or an unambiguous prefix and returns the full commit digest
        if not ref:
            raise errors.AmbiguousOrUnknownCommit()
        if len(ref) >= DIGEST_LENGTH:
            if self.is_commit(ref):
                return ref
            raise errors.AmbiguousOrUnknownCommit()
        matches = list(self._iter_commit_digests(ref))
        if len(matches) > 1:
            raise errors.AmbiguousOrUnknownCommit(f"Commit id '{ref}' is ambiguous.")
        if not matches:
            raise errors.AmbiguousOrUnknownCommit()
        return matches[0]
