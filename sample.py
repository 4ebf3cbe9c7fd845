"""
Bifrost - routing sample

Registers a handful of routes through groups and resolves a few targets.
Run with: python sample.py
"""

import logging

from bifrost import NoRouteMatched, RouteGroup, Router

# =============================================================================
# Setup
# =============================================================================

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S%z",
)
logger = logging.getLogger("bifrost.sample")

router = Router()
site = RouteGroup(router).set_default_methods(["GET"])


@site.get("/")
def home(**params: str) -> str:
    return "Welcome to Bifrost!"


@site.get("/books/[num]:id")
def show_book(id: str, **params: str) -> str:
    return f"Book #{id}"


@site.post("/books")
def create_book(**params: str) -> str:
    return "Created"


# String actions are stored untouched; resolving them is up to the caller
site.route("/authors/[slug]:slug", "AuthorsController@show")

admin = site.create_group().set_prefix("/admin").set_default_methods(["GET", "POST"])
admin.route("/users").to_action("AdminController@users")
admin.route("/users/:id").to_action("AdminController@user")


# =============================================================================
# Resolution
# =============================================================================


def resolve(target: str, method: str = "GET") -> None:
    try:
        result = router.match(target, method)
    except NoRouteMatched as exc:
        logger.warning("404 %s %s", exc.method, exc.target)
        return

    action = result.route.action
    if callable(action):
        logger.info("%s %s -> %s", method, target, action(**result.named_parameters))
    else:
        logger.info(
            "%s %s -> %s %s", method, target, action, result.named_parameters
        )


def main() -> None:
    for target, method in [
        ("/", "GET"),
        ("/books/42", "GET"),
        ("/books/forty-two", "GET"),
        ("/books", "post"),
        ("/authors/neil-gaiman", "GET"),
        ("/ADMIN/users/7", "POST"),
        ("/admin/users", "DELETE"),
    ]:
        resolve(target, method)


if __name__ == "__main__":
    main()
