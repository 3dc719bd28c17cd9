from docsim.services.detection_pipeline import DetectionPipeline
from docsim.services.report import render_report, write_report


def _result(small_corpus, top_k=2):
    return DetectionPipeline().run(small_corpus, min_length=2, top_k=top_k)


def test_report_sections(small_corpus):
    html = render_report(_result(small_corpus))

    assert html.startswith("<html><head>")
    assert "<h1>Top 2 Most Similar Text Pairs</h1>" in html
    assert "<h2>Pair 1 (Similarity: 1.00, Edit Distance: 2, Broder Containment: 0.40)</h2>" in html
    assert "<h2>Pair 2 (Similarity: 1.00, Edit Distance: 2, Broder Containment: 0.40)</h2>" in html
    assert html.count("<h2>") == 2
    assert html.endswith("</body></html>")


def test_report_uses_document_names(small_corpus):
    html = render_report(_result(small_corpus, top_k=1), ["a.txt", "b & c.txt", "d.txt"])

    assert "<h3>a.txt:</h3>" in html
    assert "<h3>b &amp; c.txt:</h3>" in html


def test_report_without_names(small_corpus):
    html = render_report(_result(small_corpus, top_k=1))

    assert "<h3>Document 0:</h3>" in html
    assert "<h3>Document 1:</h3>" in html


def test_write_report(tmp_path, small_corpus):
    path = write_report(_result(small_corpus), tmp_path / "out" / "report.html")

    assert path.exists()
    assert "<mark>abc</mark>" in path.read_text(encoding="utf-8")
