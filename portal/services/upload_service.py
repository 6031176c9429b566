from flask import current_app

from portal.exceptions import NotFound, PermissionDenied
from portal.extensions import db
from portal.models import Upload
from portal.utils.file_helper import save_image, remove_file


class UploadService:
    """图片上传服务：先落盘，再写元数据"""

    @staticmethod
    def create_upload(file, identity):
        saved_name, original_name, size, mimetype = save_image(file)
        upload = Upload(
            file_name=saved_name,
            original_name=original_name,
            file_path=f'/api/uploads/{saved_name}',
            mime_type=mimetype,
            size=size,
            uploaded_by=identity.id,
        )
        try:
            db.session.add(upload)
            db.session.commit()
        except Exception:
            db.session.rollback()
            remove_file(saved_name)
            raise
        current_app.logger.info(f'upload created: {saved_name} by {identity.username}')
        return upload

    @staticmethod
    def get_upload(upload_id):
        upload = db.session.get(Upload, upload_id)
        if upload is None:
            raise NotFound('Upload not found')
        return upload

    @staticmethod
    def list_user_uploads(user_id):
        return Upload.query.filter_by(uploaded_by=user_id) \
            .order_by(Upload.created_at.desc(), Upload.id.desc()).all()

    @staticmethod
    def delete_upload(upload_id, identity):
        """仅上传者本人或管理员可删除，同时删除物理文件"""
        upload = UploadService.get_upload(upload_id)
        if upload.uploaded_by != identity.id and not identity.is_admin:
            raise PermissionDenied('Cannot delete another user\'s upload')

        db.session.delete(upload)
        db.session.commit()
        remove_file(upload.file_name)
        current_app.logger.info(f'upload deleted: {upload.file_name} by {identity.username}')
