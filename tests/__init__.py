import os


def make_tree(root, files):
    """Create ``files`` (relative path -> bytes) under ``root``"""
    for relative_path, content in files.items():
        path = os.path.join(str(root), relative_path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "wb") as f:
            f.write(content)


def read_tree(root):
    """Return every file under ``root`` as relative path -> bytes"""
    root = str(root)
    result = {}
    for dirpath, _, filenames in os.walk(root):
        for filename in filenames:
            path = os.path.join(dirpath, filename)
            with open(path, "rb") as f:
                result[os.path.relpath(path, root)] = f.read()
    return result


def list_dirs(root):
    """Return every directory under ``root``, including itself, as relative path"""
    root = str(root)
    return sorted(os.path.relpath(dirpath, root) for dirpath, _, _ in os.walk(root))
