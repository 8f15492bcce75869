from django.shortcuts import render


def index(request):
    context = {
        "features": [
            {"text": "Stylesheets collected in the head"},
            {"text": "Scripts collected before the closing body tag"},
            {"text": "Inline code kept after the script files"},
        ],
    }
    return render(request, "index.html", context)


def error_404_view(request, exception):
    return render(request, "errors/404.html", status=404)
