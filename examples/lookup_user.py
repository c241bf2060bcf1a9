import sys
from pathlib import Path
from types import SimpleNamespace

# Add the repo root to the path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from x_client import AuthenticationError, Client, TooManyRequestsError


def main():
    """
    Example: Looking up a user and their recent posts.

    Demonstrates:
    - Credentials resolved from X_BEARER_TOKEN (or the four X_API_KEY* / X_ACCESS_TOKEN* variables)
    - Attribute-style access to decoded payloads
    - Handling typed API errors
    """
    username = sys.argv[1] if len(sys.argv) > 1 else "XDevelopers"

    with Client(default_object_shape=SimpleNamespace) as client:
        try:
            user = client.get(f"users/by/username/{username}").data
            posts = client.get(f"users/{user.id}/tweets?max_results=5", object_class=dict)
        except AuthenticationError as exc:
            print(f"Check your credentials: {exc}")
            return
        except TooManyRequestsError as exc:
            print(f"Rate limited until {exc.reset_at}")
            return

    print(f"{user.name} (@{user.username}) id={user.id}")
    for post in posts.get("data", []):
        print(f"- {post['text']}")


if __name__ == "__main__":
    main()
