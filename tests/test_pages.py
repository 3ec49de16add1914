import pytest


@pytest.mark.parametrize(
    "query, location",
    [
        ("", "/brand-monitor#files"),
        ("?brandId=abc", "/brand-monitor?brandId=abc#files"),
        ("?brandId=%20abc%20", "/brand-monitor?brandId=abc#files"),
        ("?brandId=%20%20", "/brand-monitor#files"),
        ("?brandId=a&brandId=b", "/brand-monitor#files"),
        ("?brandId=abc&blogId=9&utm=x", "/brand-monitor?brandId=abc#files"),
    ],
)
def test_generate_files_redirect(client, query, location):
    resp = client.get(f"/generate-files{query}", follow_redirects=False)

    assert resp.status_code == 307
    assert resp.headers["location"] == location


@pytest.mark.parametrize(
    "query, location",
    [
        ("", "/brand-monitor#ugc"),
        ("?blogId=12", "/brand-monitor?blogId=12#ugc"),
        ("?blogId=12&brandId=abc", "/brand-monitor?brandId=abc&blogId=12#ugc"),
        ("?brandId=a+b&other=1", "/brand-monitor?brandId=a+b#ugc"),
    ],
)
def test_blog_writer_redirect(client, query, location):
    resp = client.get(f"/blog-writer{query}", follow_redirects=False)

    assert resp.status_code == 307
    assert resp.headers["location"] == location
