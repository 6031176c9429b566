def test_create_category_derives_slug(editor_client):
    resp = editor_client.post('/api/admin/categories', json={'name': 'Teknologi', 'description': 'Tech'})
    assert resp.status_code == 201
    assert resp.get_json()['slug'] == 'teknologi'


def test_create_category_validation_and_conflict(editor_client):
    assert editor_client.post('/api/admin/categories', json={}).status_code == 400
    assert editor_client.post('/api/admin/categories', json={'name': '***'}).status_code == 400
    assert editor_client.post('/api/admin/categories', json={'name': 'Sains'}).status_code == 201
    assert editor_client.post('/api/admin/categories', json={'name': 'sains'}).status_code == 409


def test_update_category(editor_client, category_id):
    url = f'/api/admin/categories/{category_id}'
    renamed = editor_client.put(url, json={'name': 'Sains & Teknologi'}).get_json()
    assert renamed['slug'] == 'sains-teknologi'

    described = editor_client.patch(url, json={'description': 'Baru'}).get_json()
    assert described['name'] == 'Sains & Teknologi'
    assert described['slug'] == 'sains-teknologi'
    assert described['description'] == 'Baru'

    assert editor_client.put('/api/admin/categories/9999', json={'name': 'X'}).status_code == 404


def test_delete_category_in_use_is_rejected(editor_client, category_id, make_article):
    make_article('Masih Dipakai')
    resp = editor_client.delete(f'/api/admin/categories/{category_id}')
    assert resp.status_code == 409
    assert resp.get_json()['article_count'] == 1
    assert editor_client.get(f'/api/admin/categories/{category_id}').status_code == 200


def test_delete_empty_category(editor_client, client, category_id):
    assert client.get('/api/categories').get_json()
    assert editor_client.delete(f'/api/admin/categories/{category_id}').status_code == 200
    assert editor_client.get(f'/api/admin/categories/{category_id}').status_code == 404
    assert client.get('/api/categories').get_json() == []


def test_form_encoded_patch_updates_supplied_fields(editor_client, category_id):
    url = f'/api/admin/categories/{category_id}'
    resp = editor_client.patch(url, data={'description': 'Dari form'})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['description'] == 'Dari form'
    assert body['name'] == 'Teknologi'
