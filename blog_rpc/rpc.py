"""
Typed remote-procedure layer for django-blog-rpc.

Procedures are registered on a Router under a name and exposed by
RpcView at ``<prefix>/<router>.<procedure>``:

- queries answer GET, with input JSON-encoded in the ``input`` parameter
- mutations answer POST, with input as the JSON request body

Input is validated by a Django form; procedures receive a Context and the
form's ``cleaned_data``.
"""
import json
import logging

from django.http import JsonResponse
from django.views import View

logger = logging.getLogger(__name__)

QUERY = "query"
MUTATION = "mutation"


class RpcError(Exception):
    """Error raised by a procedure, sent to the client as a JSON error."""

    STATUS_BY_CODE = {
        "BAD_REQUEST": 400,
        "UNAUTHORIZED": 401,
        "FORBIDDEN": 403,
        "NOT_FOUND": 404,
        "METHOD_NOT_SUPPORTED": 405,
        "INTERNAL_SERVER_ERROR": 500,
    }

    def __init__(self, code, message=None, data=None):
        if code not in self.STATUS_BY_CODE:
            raise ValueError(f"Unknown RPC error code: {code}")
        self.code = code
        self.message = message or code
        self.data = data
        super().__init__(self.message)

    @property
    def http_status(self):
        return self.STATUS_BY_CODE[self.code]

    def to_dict(self):
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "data": self.data,
            }
        }


class Context:
    """Per-call context handed to every procedure."""

    def __init__(self, request):
        self.request = request
        self.user = request.user


class Procedure:
    """A single query or mutation."""

    def __init__(self, func, kind, input_form=None, protected=True):
        self.func = func
        self.kind = kind
        self.input_form = input_form
        self.protected = protected

    def __repr__(self):
        return f"<Procedure {self.func.__name__} ({self.kind})>"

    def validate(self, raw_input):
        """Validate raw input against the input form, returning cleaned data."""
        if self.input_form is None:
            return None
        if raw_input is None:
            raw_input = {}
        if not isinstance(raw_input, dict):
            raise RpcError("BAD_REQUEST", "Input must be a JSON object")

        form = self.input_form(data=raw_input)
        if not form.is_valid():
            raise RpcError(
                "BAD_REQUEST",
                "Invalid input",
                data=form.errors.get_json_data(),
            )
        return form.cleaned_data

    def call(self, ctx, raw_input=None):
        if self.protected and not ctx.user.is_authenticated:
            raise RpcError("UNAUTHORIZED")
        data = self.validate(raw_input)
        if self.input_form is None:
            return self.func(ctx)
        return self.func(ctx, data)


class Router:
    """
    Named collection of procedures.

    Usage:

        blog_router = Router()

        @blog_router.query("getAllBlogs")
        def get_all_blogs(ctx):
            ...

        app_router = Router.merge(blog=blog_router)
    """

    def __init__(self):
        self.procedures = {}

    def __contains__(self, name):
        return name in self.procedures

    def register(self, name, kind, input=None, protected=True):
        def decorator(func):
            if name in self.procedures:
                raise ValueError(f"Procedure already registered: {name}")
            self.procedures[name] = Procedure(func, kind, input, protected)
            return func

        return decorator

    def query(self, name, input=None, protected=True):
        return self.register(name, QUERY, input, protected)

    def mutation(self, name, input=None, protected=True):
        return self.register(name, MUTATION, input, protected)

    def get(self, name):
        try:
            return self.procedures[name]
        except KeyError:
            raise RpcError("NOT_FOUND", f"No procedure named {name}") from None

    @classmethod
    def merge(cls, **routers):
        """Combine routers, prefixing each procedure with its router's name."""
        merged = cls()
        for prefix, router in routers.items():
            for name, procedure in router.procedures.items():
                merged.procedures[f"{prefix}.{name}"] = procedure
        return merged


class RpcView(View):
    """Dispatch HTTP requests to procedures on ``router``."""

    router = None
    http_method_names = ["get", "post"]

    def get(self, request, name):
        raw = request.GET.get("input")
        return self.handle(request, name, QUERY, raw)

    def post(self, request, name):
        return self.handle(request, name, MUTATION, request.body)

    def http_method_not_allowed(self, request, *args, **kwargs):
        error = RpcError("METHOD_NOT_SUPPORTED")
        return JsonResponse(error.to_dict(), status=error.http_status)

    def handle(self, request, name, kind, raw):
        try:
            procedure = self.router.get(name)
            if procedure.kind != kind:
                raise RpcError(
                    "METHOD_NOT_SUPPORTED",
                    f"{name} is a {procedure.kind}",
                )
            raw_input = self.decode(raw)
            logger.debug("Calling %s for user %s", name, request.user.pk)
            result = procedure.call(Context(request), raw_input)
        except RpcError as error:
            logger.warning("Procedure %s failed: %s %s", name, error.code, error.message)
            return JsonResponse(error.to_dict(), status=error.http_status)
        return JsonResponse(result)

    @staticmethod
    def decode(raw):
        if not raw:
            return None
        try:
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8")
            return json.loads(raw)
        except ValueError:
            raise RpcError("BAD_REQUEST", "Input is not valid JSON") from None
