from flask import Request


class UploadRequest(Request):
    """
    Request whose form parser raises on malformed bodies (missing boundary,
    truncated multipart) instead of returning empty `form`/`files`.
    """

    def make_form_data_parser(self):
        parser = super().make_form_data_parser()
        parser.silent = False
        return parser
