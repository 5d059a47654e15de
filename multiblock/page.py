# page.py
# Per-request page state. Views create one Page and hand it to the helpers
# instead of sharing a module-level page object.


class Page:

    def __init__(self, request=None):
        self.request = request
        self.context = None
        self.url = None
        self.pagelayout = None

    def set_context(self, context):
        self.context = context

    def set_url(self, url):
        self.url = url

    def set_pagelayout(self, pagelayout):
        self.pagelayout = pagelayout

    def as_template_context(self):
        return {
            "page_context": self.context,
            "page_url": self.url,
            "page_layout": self.pagelayout,
        }
