def test_category_article_publish_scenario(editor_client, client):
    category = editor_client.post('/api/admin/categories', json={'name': 'Teknologi'}).get_json()
    assert category['slug'] == 'teknologi'

    article = editor_client.post('/api/admin/articles', json={
        'title': 'Startup Lokal Tumbuh',
        'content': '<p>Isi</p>',
        'category_id': category['id'],
        'status': 'draft',
    }).get_json()
    assert article['published_at'] is None
    assert client.get('/api/articles').get_json()['total'] == 0
    assert client.get(f"/api/articles/{article['slug']}").status_code == 404

    updated = editor_client.put(f"/api/admin/articles/{article['id']}", json={'status': 'published'}).get_json()
    assert updated['published_at'] is not None

    listing = client.get('/api/articles').get_json()
    assert [a['id'] for a in listing['articles']] == [article['id']]
    detail = client.get(f"/api/articles/{article['slug']}")
    assert detail.status_code == 200
    assert detail.get_json()['category']['slug'] == 'teknologi'


def test_public_listing_filters_and_pages(client, app, make_article):
    with app.app_context():
        from portal.services.category_service import CategoryService
        CategoryService.create_category({'name': 'Ekonomi'})
        ekonomi_id = CategoryService.get_category_by_slug('ekonomi').id

    for i in range(12):
        make_article(f'Tekno {i}')
    make_article('Pasar Saham', category=ekonomi_id, content='<p>IHSG menguat</p>')
    make_article('Draft Ekonomi', status='draft', category=ekonomi_id)

    default_page = client.get('/api/articles').get_json()
    assert default_page['total'] == 13
    assert len(default_page['articles']) == 10
    assert default_page['articles'][0]['title'] == 'Pasar Saham'

    by_category = client.get('/api/articles?category=ekonomi').get_json()
    assert [a['title'] for a in by_category['articles']] == ['Pasar Saham']

    # 未知分类忽略该条件
    unknown = client.get('/api/articles?category=tidak-ada').get_json()
    assert unknown['total'] == 13

    search = client.get('/api/articles?search=ihsg').get_json()
    assert search['total'] == 1

    page = client.get('/api/articles?limit=5&offset=10').get_json()
    assert len(page['articles']) == 3
    assert page['total'] == 13


def test_featured_article(client, make_article):
    assert client.get('/api/articles/featured/latest').get_json() is None
    make_article('Lama')
    make_article('Baru')
    make_article('Draft Terbaru', status='draft')
    featured = client.get('/api/articles/featured/latest').get_json()
    assert featured['title'] == 'Baru'
    assert featured['author']['username'] == 'editor'


def test_related_articles(client, make_article):
    main_id = make_article('Utama')
    make_article('Terkait')
    resp = client.get(f'/api/articles/{main_id}/related')
    assert resp.status_code == 200
    assert [a['title'] for a in resp.get_json()] == ['Terkait']
    assert client.get('/api/articles/9999/related').status_code == 404


def test_categories_with_counts(client, editor_client, make_article, category_id):
    make_article('Satu')
    make_article('Dua', status='draft')
    categories = client.get('/api/categories').get_json()
    assert categories[0]['slug'] == 'teknologi'
    assert categories[0]['article_count'] == 2

    # 新增文章后缓存失效
    make_article('Tiga')
    assert client.get('/api/categories').get_json()[0]['article_count'] == 3

    editor_client.post('/api/admin/categories', json={'name': 'Olahraga'})
    names = [c['name'] for c in client.get('/api/categories').get_json()]
    assert names == ['Olahraga', 'Teknologi']


def test_category_by_slug(client, category_id):
    resp = client.get('/api/categories/teknologi')
    assert resp.status_code == 200
    assert resp.get_json()['id'] == category_id
    missing = client.get('/api/categories/tidak-ada')
    assert missing.status_code == 404
    assert missing.get_json()['message'] == 'Category not found'


def test_zero_limit_returns_every_article(client, make_article):
    make_article('Pertama')
    make_article('Kedua')
    resp = client.get('/api/articles?limit=0').get_json()
    assert resp['total'] == 2
    assert [a['title'] for a in resp['articles']] == ['Kedua', 'Pertama']


def test_unknown_route_returns_json(client):
    resp = client.get('/api/nope')
    assert resp.status_code == 404
    assert resp.get_json()['success'] is False
