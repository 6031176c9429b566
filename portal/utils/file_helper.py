import os
import uuid
from PIL import Image, UnidentifiedImageError
from flask import current_app

from portal.exceptions import ValidationError


def get_file_extension(filename):
    """从文件名获取扩展名"""
    if not filename or '.' not in filename:
        return None
    return filename.rsplit('.', 1)[1].lower()


def get_stream_size(file):
    """读取上传流的字节数（不移动读取位置）"""
    stream = file.stream
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


def validate_image(file):
    """
    校验上传图片：MIME 类型、扩展名、大小上限、Pillow 可识别
    返回: 小写扩展名
    """
    if not file or not file.filename or not file.filename.strip():
        raise ValidationError.for_field('file', 'No file uploaded')

    mimetype = file.mimetype or ''
    if not mimetype.startswith('image/'):
        raise ValidationError.for_field('file', 'Only image files are allowed')

    ext = get_file_extension(file.filename)
    if ext not in current_app.config['ALLOWED_IMAGE_EXTENSIONS']:
        raise ValidationError.for_field('file', f'Unsupported image extension: {ext}')

    max_size = current_app.config['UPLOAD_MAX_SIZE']
    if get_stream_size(file) > max_size:
        raise ValidationError.for_field('file', f'File exceeds the {format_size(max_size)} limit')

    try:
        Image.open(file.stream).verify()
    except (UnidentifiedImageError, OSError, SyntaxError):
        raise ValidationError.for_field('file', 'File is not a valid image')
    finally:
        file.stream.seek(0)

    return ext


def save_image(file):
    """
    校验并落盘保存图片
    返回: (saved_filename, original_name, file_size, mimetype)
    """
    ext = validate_image(file)

    # 生成唯一文件名防止覆盖
    unique_name = f"{uuid.uuid4().hex}.{ext}"
    upload_folder = current_app.config['UPLOAD_FOLDER']
    os.makedirs(upload_folder, exist_ok=True)

    save_path = os.path.join(upload_folder, unique_name)
    file.save(save_path)
    file_size = os.path.getsize(save_path)
    current_app.logger.info(f'save_image: {file.filename} -> {unique_name} ({format_size(file_size)})')

    return unique_name, file.filename, file_size, file.mimetype


def remove_file(filename):
    """删除上传目录中的物理文件，文件不存在时忽略"""
    full_path = os.path.join(current_app.config['UPLOAD_FOLDER'], filename)
    if os.path.exists(full_path):
        os.remove(full_path)
        current_app.logger.info(f'remove_file: {filename}')


def format_size(size):
    """将字节转换为易读格式 (KB, MB)"""
    power = 2**10
    n = 0
    power_labels = {0 : '', 1: 'K', 2: 'M', 3: 'G', 4: 'T'}
    while size > power:
        size /= power
        n += 1
    return f"{size:.1f} {power_labels[n]}B"
