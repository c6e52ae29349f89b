# -*- coding: utf-8 -*-
import os
from io import BytesIO
from unittest import TestCase, mock

from PIL import Image

from app import create_app
from qrsymbol import AllocationFailure, InternalInconsistency


class IndexViewTests(TestCase):
    def setUp(self):
        self.client = create_app({'TESTING': True}).test_client()

    def test_get(self):
        response = self.client.get('/')
        self.assertEqual(response.status_code, 200)
        self.assertIn(b'QR Symbol Encoder', response.data)

    def test_post_shows_symbol(self):
        response = self.client.post('/', data={'text': 'HELLO', 'ecc': 'L', 'version': 'auto', 'mask': 'auto'})
        self.assertEqual(response.status_code, 200)
        self.assertIn(b'Version 1 (21x21)', response.data)
        self.assertIn(b'data:image/png;base64,', response.data)

    def test_post_reports_oversized_payload(self):
        response = self.client.post('/', data={'text': 'x' * 3000})
        self.assertEqual(response.status_code, 413)
        self.assertIn(b'payload too large for encoding', response.data)

    def test_post_reports_invalid_parameters(self):
        response = self.client.post('/', data={'text': 'HELLO', 'ecc': 'Z'})
        self.assertEqual(response.status_code, 400)
        self.assertIn(b'invalid parameters', response.data)

    def test_post_reports_internal_faults_as_server_errors(self):
        for error in (InternalInconsistency("block sizes"), AllocationFailure("grid")):
            with self.subTest(error=type(error).__name__):
                with mock.patch('app.make_qr', side_effect=error):
                    response = self.client.post('/', data={'text': 'HELLO'})
                self.assertEqual(response.status_code, 500)
                self.assertIn(b'internal encoder error', response.data)

    def test_post_without_text_prompts_for_payload(self):
        response = self.client.post('/', data={'text': ''})
        self.assertEqual(response.status_code, 200)
        self.assertIn(b'Enter the payload to encode.', response.data)


class ExportViewTests(TestCase):
    def setUp(self):
        self.client = create_app({'TESTING': True}).test_client()

    def test_png(self):
        response = self.client.get('/export/png', query_string={'text': 'HELLO', 'border': '4'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, 'image/png')
        self.assertEqual(Image.open(BytesIO(response.data)).size, (290, 290))

    def test_svg(self):
        response = self.client.get('/export/svg', query_string={'text': 'HELLO'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, 'image/svg+xml')
        self.assertIn(b'<svg', response.data)

    def test_txt(self):
        response = self.client.get('/export/txt', query_string={'text': 'HELLO', 'border': '2'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, 'text/plain')
        self.assertEqual(len(response.get_data(as_text=True).rstrip('\n').split('\n')), 25)

    def test_missing_text(self):
        self.assertEqual(self.client.get('/export/png').status_code, 400)

    def test_oversized_payload(self):
        response = self.client.get('/export/txt', query_string={'text': 'x' * 3000})
        self.assertEqual(response.status_code, 413)
        self.assertIn(b'payload too large for encoding', response.data)

    def test_invalid_ecc(self):
        response = self.client.get('/export/txt', query_string={'text': 'HELLO', 'ecc': 'Z'})
        self.assertEqual(response.status_code, 400)

    def test_invalid_border_falls_back_to_default(self):
        response = self.client.get('/export/png', query_string={'text': 'HELLO', 'border': '-3'})
        self.assertEqual(Image.open(BytesIO(response.data)).size, (290, 290))


class ConfigTests(TestCase):
    def test_environment_overrides_defaults(self):
        with mock.patch.dict(os.environ, {'QRSYMBOL_QR_PNG_SCALE': '2'}):
            app = create_app({'TESTING': True})
        self.assertEqual(app.config['QR_PNG_SCALE'], 2)
        response = app.test_client().get('/export/png', query_string={'text': 'HELLO'})
        self.assertEqual(Image.open(BytesIO(response.data)).size, (58, 58))

    def test_mapping_overrides_environment(self):
        with mock.patch.dict(os.environ, {'QRSYMBOL_QR_DEFAULT_ECC': '"Q"'}):
            app = create_app({'TESTING': True, 'QR_DEFAULT_ECC': 'H'})
        self.assertEqual(app.config['QR_DEFAULT_ECC'], 'H')
